"""
utils/db.py
-----------------
This module initializes the MongoDB connection and wraps the three
attendance collections behind a small store object that the Flask app
carries around (see create_app in app.py).
"""

from bson import ObjectId
from flask import current_app
from flask_pymongo import PyMongo

# Flask-PyMongo extension, bound to the app by init_db_connection
mongo = PyMongo()

STORE_EXTENSION_KEY = "attendance_store"


def to_object_id(value):
    """
    Convert an incoming identifier to an ObjectId.
    Raises bson.errors.InvalidId for badly shaped strings and TypeError
    for anything that is not a str / bytes / ObjectId (e.g. a bare number).
    """
    if value is None:
        # ObjectId(None) would mint a fresh id
        raise ValueError("identifier is required")
    if isinstance(value, ObjectId):
        return value
    return ObjectId(value)


class DocumentCollection:
    """Narrow view over one PyMongo collection."""

    def __init__(self, collection):
        self._collection = collection

    @property
    def name(self):
        return self._collection.name

    def insert(self, document):
        """Insert a document and return it with its store-assigned _id."""
        document = dict(document)
        result = self._collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    def find_by_id(self, document_id):
        return self._collection.find_one({"_id": to_object_id(document_id)})

    def find_one(self, query):
        return self._collection.find_one(query)

    def find_many(self, query=None):
        return list(self._collection.find(query or {}))

    def delete_many(self, query=None):
        return self._collection.delete_many(query or {}).deleted_count


class AttendanceStore:
    """Employees, check-ins and check-outs of one MongoDB database."""

    def __init__(self, database):
        self.employees = DocumentCollection(database["employees"])
        self.check_ins = DocumentCollection(database["checkins"])
        self.check_outs = DocumentCollection(database["checkouts"])

    def collections(self):
        return [self.employees, self.check_ins, self.check_outs]

    def clear(self):
        for collection in self.collections():
            collection.delete_many({})


def init_db_connection(app, store=None):
    """
    Attach an AttendanceStore to the Flask app.
    Without an explicit store, the connection comes from MONGO_URI
    via Flask-PyMongo.
    """
    if store is None:
        mongo.init_app(app)
        store = AttendanceStore(mongo.db)
        app.logger.info("MongoDB connection initialized (%s)", mongo.db.name)
    else:
        app.logger.info("Using injected attendance store")

    app.extensions[STORE_EXTENSION_KEY] = store
    return store


def get_store():
    return current_app.extensions[STORE_EXTENSION_KEY]
