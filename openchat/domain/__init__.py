"""
Domain layer: pure models, repository contracts, field constants and the
typed failures raised by use cases.
"""
