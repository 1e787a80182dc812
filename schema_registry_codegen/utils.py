"""
Identifier and path helpers for schema ids.

Schema ids are dotted strings such as ``io.k8s.api.core.v1.Pod``. These
functions are pure and total: every id maps to a class name and a path.
"""

import re

REF_PREFIXES = ("#/definitions/", "#/components/schemas/")

APIMACHINERY_PREFIX = "io.k8s.apimachinery."
KUBERNETES_PREFIX = "io.k8s."

SCHEMA_DIR = "_schemas"

# Anything that cannot appear in an identifier separates words
_SEPARATOR_PATTERN = re.compile(r"[^0-9A-Za-z]+")


def trim_suffix(text: str, suffix: str) -> str:
    if suffix and text.endswith(suffix):
        return text[: -len(suffix)]
    return text


def trim_ref_prefix(ref: str) -> str:
    """Strip the OpenAPI v2/v3 definitions prefix from a ``$ref`` value.

    Examples:
        "#/definitions/io.k8s.api.core.v1.Pod" -> "io.k8s.api.core.v1.Pod"
        "#/components/schemas/a.B" -> "a.B"
        "a.B" -> "a.B"
    """
    for prefix in REF_PREFIXES:
        if ref.startswith(prefix):
            return ref[len(prefix) :]
    return ref


def _upper_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def _to_identifier(text: str) -> str:
    """Join separator-delimited words, upper-casing only their first letter.

    The rest of each word keeps its case, so "ObjectMeta" and "JSON" survive
    unchanged while "k8s" becomes "K8s".
    """
    return "".join(_upper_first(word) for word in _SEPARATOR_PATTERN.split(text) if word)


def get_class_name(schema_id: str, qualified: bool = True) -> str:
    """Derive a class-like name from a schema id.

    Qualified names keep every segment, so distinct ids get distinct names
    unless they differ only in separators.

    Examples:
        "io.k8s.api.core.v1.Pod" -> "IoK8sApiCoreV1Pod"
        "a.C" -> "AC"
        "io.k8s.api.core.v1.Pod" (not qualified) -> "Pod"

    Args:
        schema_id: Dotted schema id
        qualified: Use the whole id instead of its last segment

    Returns:
        An identifier usable as a module name and an import alias
    """
    if qualified:
        return _to_identifier(schema_id)
    return _to_identifier(schema_id.rsplit(".", 1)[-1])


def get_schema_path(schema_id: str, extension: str, qualified: bool = True) -> str:
    return f"{SCHEMA_DIR}/{get_class_name(schema_id, qualified)}{extension}"


def is_apimachinery_id(schema_id: str) -> bool:
    return schema_id.startswith(APIMACHINERY_PREFIX)


def is_kubernetes_id(schema_id: str) -> bool:
    return schema_id.startswith(KUBERNETES_PREFIX)
