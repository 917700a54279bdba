"""SkyPlan — flight planning computation engine and API."""
