import re
from datetime import datetime

import pytest
import pytz
from bson import ObjectId
from bson.errors import InvalidId

from app.utils.helpers import escape_search_term, serialize_doc, serialize_docs, to_object_id


def test_serialize_doc_converts_ids_and_datetimes():
    oid = ObjectId()
    owner = ObjectId()
    doc = {
        "_id": oid,
        "owner": owner,
        "createdAt": datetime(2024, 3, 1, 12, 30),
        "nested": {"ref": owner},
        "rooms": [{"ref": owner}, "plain"],
    }
    result = serialize_doc(doc)

    assert result["_id"] == str(oid)
    assert result["owner"] == str(owner)
    assert result["createdAt"] == "2024-03-01T12:30:00+00:00"
    assert result["nested"] == {"ref": str(owner)}
    assert result["rooms"] == [{"ref": str(owner)}, "plain"]


def test_serialize_doc_normalises_aware_datetimes_to_utc():
    karachi = pytz.timezone("Asia/Karachi")
    doc = {"createdAt": karachi.localize(datetime(2024, 3, 1, 17, 0))}
    assert serialize_doc(doc)["createdAt"] == "2024-03-01T12:00:00+00:00"


def test_serialize_doc_none():
    assert serialize_doc(None) is None
    assert serialize_docs([]) == []


def test_to_object_id():
    oid = ObjectId()
    assert to_object_id(str(oid)) == oid
    assert to_object_id(oid) is oid
    with pytest.raises(InvalidId):
        to_object_id("nope")
    with pytest.raises(InvalidId):
        to_object_id(None)


def test_escape_search_term_is_literal():
    pattern = escape_search_term("B&B (old) .*")
    assert re.search(pattern, "Cosy B&B (old) .* house")
    assert not re.search(pattern, "B&B old anything")


def test_escape_search_term_keeps_spaces():
    pattern = escape_search_term(" hotel")
    assert re.search(pattern, "Grand hotel")
    assert not re.search(pattern, "hotel Royal")
