import logging
from pymongo import MongoClient, ASCENDING, DESCENDING

logger = logging.getLogger(__name__)

class Database:
    def __init__(self):
        self.client = None
        self.db = None

    def initialize(self, app, client=None):
        """Initialize database connection"""

        self.client = client or MongoClient(app.config['MONGODB_URI'])
        self.db = self.client[app.config['MONGODB_DB']]

        # Email uniqueness is enforced by the store
        self.db.users.create_index("email", unique=True)
        self.db.templates.create_index([("owner_id", ASCENDING), ("created_at", DESCENDING)])
        self.db.contracts.create_index("owner_id")
        self.db.contracts.create_index("collaborators")
        self.db.clauses.create_index([("is_public", ASCENDING), ("category", ASCENDING)])

        logger.info("Connected to database %s", app.config['MONGODB_DB'])

    def get_db(self):
        """Get database instance"""
        return self.db

    def close(self):
        """Close database connection"""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None

# Global database instance
db_instance = Database()
