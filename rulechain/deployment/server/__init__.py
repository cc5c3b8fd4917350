"""rulechain/deployment/server — FastAPI application, routes and middleware."""
