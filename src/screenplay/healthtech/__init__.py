"""HealthTech triage application: locator catalogs, Tasks and Questions."""
