"""Record stores used by the request handlers.

Handlers only see the ``get``/``put``/``delete``/``list`` interface, so the
backing store can change without touching them. ``SQLStore`` keeps rows in
the app's SQLAlchemy database, which is an in-memory SQLite database unless
``DATABASE_URL`` points somewhere else.
"""
from flask import current_app

from models import db, Message, Task, User


class Store:
    def get(self, key):
        raise NotImplementedError

    def put(self, record):
        raise NotImplementedError

    def delete(self, key):
        raise NotImplementedError

    def list(self):
        raise NotImplementedError


class SQLStore(Store):
    def __init__(self, model, key='id'):
        self.model = model
        self.key = key

    def get(self, key):
        if key is None:
            return None
        return db.session.execute(
            db.select(self.model).filter_by(**{self.key: key})
        ).scalar_one_or_none()

    def put(self, record):
        db.session.add(record)
        db.session.commit()
        return record

    def delete(self, key):
        record = self.get(key)
        if record is None:
            return False
        db.session.delete(record)
        db.session.commit()
        return True

    def list(self):
        return db.session.execute(
            db.select(self.model).order_by(self.model.id)
        ).scalars().all()


class Stores:
    def __init__(self, users, messages, tasks):
        self.users = users
        self.messages = messages
        self.tasks = tasks


def sql_stores():
    return Stores(
        users=SQLStore(User, key='email'),
        messages=SQLStore(Message),
        tasks=SQLStore(Task),
    )


def stores():
    """Stores registered on the current app by ``create_app``."""
    return current_app.extensions['mindai.stores']
