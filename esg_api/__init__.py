"""ESG sustainability API: emissions, energy, reports and ESG dashboards."""
