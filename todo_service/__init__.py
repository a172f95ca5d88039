"""
Todo Service

CRUD HTTP API for Todo items stored in DynamoDB.
"""

__version__ = "0.1.0"
