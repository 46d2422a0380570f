"""WorkMongolia job board: domain model, recruitment master API and admin client"""

__version__ = "0.1.0"
