"""
Feature modules for GPX Training Analyzer.

Each feature is a self-contained module with:
- schemas.py - Pydantic schemas
- parser.py / aggregator.py / service.py - Business logic
"""
