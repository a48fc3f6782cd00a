"""API layer - FastAPI routers, dependencies, middleware and response models"""
