"""
Domain layer.

Pure business logic: entities, value objects and repository contracts.
Nothing here imports from the application, infrastructure or api layers.
"""
