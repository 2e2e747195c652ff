from orchestra_cms.extensions import db

# Every content type is a single well-known row
CONTENT_ID = 1

class ContentRecordMixin:
    """Optimistic concurrency token and last editor for a Parent Record."""

    version = db.Column(db.Integer, nullable=False, default=0)
    updated_by = db.Column(db.Integer, nullable=True)

    def bump_version(self, actor_id=None):
        self.version = (self.version or 0) + 1
        self.updated_by = actor_id
