"""
SQLAlchemy persistence for users and orders.
"""
