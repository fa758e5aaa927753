"""Failure message templates.

Downstream tests match on these texts, so any wording change must bump
MESSAGES_VERSION.
"""

MESSAGES_VERSION = "1"

# Preconditions
MISSING_AS = "you must pass `as:` with the name of the relationship"
MISSING_FOR = "you must pass `for:` with the parent record"
MISSING_PATH = "you must pass `path:` to the links object"
INVALID_LINKS_PATH = "the last element of `path:` must be an object with a `links` member"

# Resources
RECORD_NOT_FOUND = 'could not find a record with matching `id` {id} and `type` "{type}"'
RECORD_MISMATCH = 'record with `id` {id} and `type` "{type}" was found but had mis-matching attributes'
RECORD_PRESENT = "did not expect {record} to be found."
PATH_NOT_RESOLVED = "could not resolve path `{path}`"

# Relationships
NO_RELATIONSHIPS = 'could not find any relationships for record matching `id` {id} and `type` "{type}"'
RELATIONSHIP_NOT_FOUND = (
    'could not find the relationship `{name}` for record matching `id` {id} and `type` "{type}"'
)
LINKAGE_NOT_FOUND = (
    'could not find relationship `{name}` with `id` {child_id} and `type` "{child_type}" '
    'for record matching `id` {id} and `type` "{type}"'
)
LINKAGE_PRESENT = (
    'was not expecting to find the relationship `{name}` with `id` {child_id} and `type` "{child_type}" '
    'for record matching `id` {id} and `type` "{type}"'
)

# Top-level objects
JSONAPI_NOT_FOUND = "jsonapi object not found"
JSONAPI_MISMATCH = "jsonapi object mismatch\n{entries}"
JSONAPI_MEMBER_MISMATCH = 'Expected:\n  `{key}` "{expected}"\nGot:\n  `{key}` "{actual}"'
META_NOT_FOUND = "meta object not found"
META_MISMATCH = "meta object mismatch"
LINKS_NOT_FOUND = "links object not found"
LINKS_MISMATCH = "links object mismatch"

# Structure
DATA_AND_ERRORS = "the members `data` and `errors` MUST NOT coexist in the same document"
INCLUDED_WITHOUT_DATA = (
    "If a document does not contain a top-level data key, "
    "the included member MUST NOT be present either."
)
MISSING_TOP_LEVEL = (
    "A document MUST contain at least one of the following top-level members: "
    "'data', 'errors', 'meta'"
)
LINKS_NOT_OBJECT = "the value of each links member MUST be an object"
META_NOT_OBJECT = "the value of each meta member MUST be an object"
LINK_RULE = (
    "A link MUST be represented as either a string or a map containing only "
    "`href` and `meta` objects"
)
LINK_INVALID_KEYS = LINK_RULE + "\n\nInvalid keys: {keys}"
LINK_INVALID_VALUE = LINK_RULE + "\n\nThe value for key `{key}` must be a string or map"

# Serializer
UNDERIVABLE_TYPE = "No type can be derived from record. Please pass a type to `serialize`."
