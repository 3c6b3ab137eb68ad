from datetime import datetime, timezone

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from utils.db import attendance_col
from utils.errors import NotFound, PersistenceError
from utils.validators import validate_attendance


def _utcnow():
    # Mongo keeps millisecond precision; trim so the saved and returned values match
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def _isoformat(value):
    if isinstance(value, datetime):
        return value.isoformat(timespec="milliseconds") + "Z"
    return value


def _object_id(record_id):
    # malformed ids can never match a stored record
    if not ObjectId.is_valid(record_id):
        raise NotFound()
    return ObjectId(record_id)


class Attendance:
    @staticmethod
    def collection():
        return attendance_col()

    def __init__(self, email, full_name, is_member_of_ministry, ministries=None, contact=None,
                 timestamp=None, created_at=None, updated_at=None):
        self.email = email
        self.full_name = full_name
        self.contact = contact
        self.is_member_of_ministry = is_member_of_ministry
        self.ministries = list(ministries or []) if is_member_of_ministry else []
        self.timestamp = timestamp or _utcnow()
        self.created_at = created_at or self.timestamp
        self.updated_at = updated_at or self.created_at
        self._id = None

    def to_dict(self):
        return {
            "email": self.email,
            "fullName": self.full_name,
            "contact": self.contact,
            "isMemberOfMinistry": self.is_member_of_ministry,
            "ministries": self.ministries,
            "timestamp": self.timestamp,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    def save(self):
        document = self.to_dict()
        try:
            result = Attendance.collection().insert_one(document)
        except PyMongoError as e:
            raise PersistenceError("Failed to record attendance", str(e)) from e
        self._id = result.inserted_id
        document["_id"] = self._id
        return document

    # ------------------------------------------------------------------
    # Operations used by the API
    # ------------------------------------------------------------------
    @staticmethod
    def create(payload):
        """Validate a check-in payload, store it and return the saved document."""
        fields = validate_attendance(payload)
        record = Attendance(
            email=fields["email"],
            full_name=fields["fullName"],
            contact=fields["contact"],
            is_member_of_ministry=fields["isMemberOfMinistry"],
            ministries=fields["ministries"],
        )
        return record.save()

    @staticmethod
    def build_query(start_date=None, end_date=None, ministry=None):
        query = {}
        if start_date or end_date:
            query["timestamp"] = {}
            if start_date:
                query["timestamp"]["$gte"] = start_date
            if end_date:
                query["timestamp"]["$lte"] = end_date
        if ministry:
            # matches any element of the ministries array
            query["ministries"] = ministry
        return query

    @staticmethod
    def find(start_date=None, end_date=None, ministry=None):
        """Records in the inclusive date range / ministry, newest first."""
        query = Attendance.build_query(start_date, end_date, ministry)
        try:
            cursor = Attendance.collection().find(query).sort([("timestamp", DESCENDING), ("_id", DESCENDING)])
            return list(cursor)
        except PyMongoError as e:
            raise PersistenceError("Failed to fetch attendance records", str(e)) from e

    @staticmethod
    def find_by_id(record_id):
        oid = _object_id(record_id)
        try:
            record = Attendance.collection().find_one({"_id": oid})
        except PyMongoError as e:
            raise PersistenceError("Failed to fetch attendance record", str(e)) from e
        if not record:
            raise NotFound()
        return record

    @staticmethod
    def delete_by_id(record_id):
        """Remove a record and return it as it was before deletion."""
        oid = _object_id(record_id)
        try:
            record = Attendance.collection().find_one_and_delete({"_id": oid})
        except PyMongoError as e:
            raise PersistenceError("Failed to delete attendance record", str(e)) from e
        if not record:
            raise NotFound()
        return record

    @staticmethod
    def stats():
        pipeline = [
            {"$match": {"isMemberOfMinistry": True}},
            {"$unwind": "$ministries"},
            {"$group": {"_id": "$ministries", "count": {"$sum": 1}}},
            {"$sort": {"count": -1, "_id": 1}},
        ]
        col = Attendance.collection()
        try:
            return {
                "total": col.count_documents({}),
                "withMinistry": col.count_documents({"isMemberOfMinistry": True}),
                "withoutMinistry": col.count_documents({"isMemberOfMinistry": False}),
                "ministryBreakdown": list(col.aggregate(pipeline)),
            }
        except PyMongoError as e:
            raise PersistenceError("Failed to fetch statistics", str(e)) from e

    @staticmethod
    def serialize(record):
        """JSON-ready copy of a stored document."""
        data = {key: _isoformat(value) for key, value in record.items()}
        if "_id" in record:
            data["_id"] = str(record["_id"])
            data["id"] = data["_id"]
        return data
