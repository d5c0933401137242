"""
Solebysole Core Module

This package contains the shop backend components:
- db: Supabase client factory
- auth: tokens, password hashing, route policy
- services: models, repositories and domain services
- routers: FastAPI endpoints
"""
