"""
Feature modules for the trip GPX engine.

Each feature is a self-contained module with:
- schemas.py - Pydantic schemas
- parser.py / service modules - Business logic
- exceptions.py - Feature errors
"""
