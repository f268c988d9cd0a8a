from contract_backend.config.database import db_instance

class Clause:
    def __init__(self, title, content, category=None, is_public=True, _id=None):
        self.id = str(_id) if _id else None
        self.title = title
        self.content = content
        self.category = category
        self.is_public = is_public

    def save(self):
        """Save clause to database"""
        db = db_instance.get_db()
        clause_data = {
            'title': self.title,
            'content': self.content,
            'category': self.category,
            'is_public': self.is_public
        }

        result = db.clauses.insert_one(clause_data)
        self.id = str(result.inserted_id)
        return self

    @staticmethod
    def find_public():
        """Find clauses visible in the shared library"""
        db = db_instance.get_db()
        clauses = []

        for clause_data in db.clauses.find({'is_public': True}).sort('category', 1):
            clauses.append(Clause(
                title=clause_data.get('title'),
                content=clause_data.get('content'),
                category=clause_data.get('category'),
                is_public=clause_data['is_public'],
                _id=clause_data['_id']
            ))

        return clauses

    def to_dict(self):
        """Convert clause to dictionary"""
        return {
            'id': self.id,
            'title': self.title,
            'content': self.content,
            'category': self.category,
            'isPublic': self.is_public
        }
