"""
Controllers Package

Contains the HTTP blueprints, one per service.
"""
