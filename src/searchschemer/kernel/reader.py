"""Mapping reader: flattens a mapping document into field-attribute records.

A mapping document comes in three shapes:

- bare type body: ``{"properties": {...}}``
- multi-type wrapper: ``{"mappings": {"typeA": {...}, "typeB": {...}}}``
- wrapper omitted: ``{"typeA": {"properties": {...}}}``

The shape is decided from the first token(s) of the root object. Field names
are qualified with their type name while reading; when the document turns
out to hold exactly one type, the prefix is stripped again in a final pass.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Tuple

from searchschemer.contracts import ReaderOptions
from searchschemer.errors import MalformedMappingError, MissingPropertiesError
from searchschemer.kernel.fields import FieldAttributes, parse_bool, parse_float
from searchschemer.kernel.tokens import TokenCursor, TokenKind
from searchschemer.names import MappingName

logger = logging.getLogger(__name__)

_SCALAR_KINDS = (TokenKind.STRING, TokenKind.NUMBER, TokenKind.BOOLEAN)


class DocumentShape(str, Enum):
    """Root layouts of a mapping document."""
    BARE_BODY = "bare_body"
    WRAPPED = "wrapped"
    SINGLE_NAMED_TYPE = "single_named_type"


def qualify_name(type_name: Optional[str], name: str) -> str:
    """Prefix ``name`` with ``type_name`` when a type name is present."""
    if type_name is None:
        return name
    return f"{type_name}.{name}"


def set_property(property_name: str, value: str, field: FieldAttributes) -> None:
    """Apply one recognized property to ``field``; unknown names are ignored.

    Raises:
        MappingValueError: If a boolean or float property does not parse
    """
    if property_name == MappingName.TYPE:
        field.type = value
    elif property_name == MappingName.STORE:
        field.set_stored(value)
    elif property_name == MappingName.INDEX:
        field.set_analyzed(value)
    elif property_name == MappingName.OMIT_FREQ_AND_POSITIONS:
        field.omit_term_freq_and_positions = parse_bool(property_name, value)
    elif property_name == MappingName.OMIT_NORMS:
        field.omit_norms = parse_bool(property_name, value)
    elif property_name == MappingName.BOOST:
        field.boost = parse_float(property_name, value)


def remove_type_name(fields: List[FieldAttributes], type_name: Optional[str]) -> int:
    """Strip a leading ``type_name.`` from every field name.

    Returns:
        Number of renamed fields (0 when ``type_name`` is None)
    """
    if type_name is None:
        return 0
    prefix = f"{type_name}."
    return sum(1 for field in fields if field.strip_prefix(prefix))


class FieldsReader:
    """One read session over a single mapping document.

    The session owns its cursor and its result list; create a new reader for
    every document.
    """

    def __init__(self, cursor: TokenCursor, options: Optional[ReaderOptions] = None):
        self._cursor = cursor
        self._options = options or ReaderOptions()
        self._fields: List[FieldAttributes] = []

    def read(self) -> List[FieldAttributes]:
        """Read the whole document and return its fields in document order."""
        cursor = self._cursor
        number_of_mappings = 0
        type_name: Optional[str] = None

        cursor.begin_object()
        shape, first_name = self._detect_shape()
        logger.debug("Detected mapping shape: %s", shape.value)

        if shape is DocumentShape.BARE_BODY:
            self._walk_type_members(None, first_name)
        elif shape is DocumentShape.WRAPPED:
            cursor.begin_object()
            while cursor.peek() is not TokenKind.END_OBJECT:
                number_of_mappings += 1
                type_name = cursor.next_name()
                self._read_type(type_name)
            cursor.end_object()
        else:
            number_of_mappings += 1
            type_name = first_name
            self._read_type(type_name)

        cursor.end_object()
        cursor.end_document()

        if number_of_mappings == 1:
            renamed = remove_type_name(self._fields, type_name)
            logger.debug("Single type '%s': stripped prefix from %d fields", type_name, renamed)

        for field in self._fields:
            field.seal()
        logger.info("Read %d fields from %d mapping types", len(self._fields), number_of_mappings)
        return self._fields

    def _detect_shape(self) -> Tuple[DocumentShape, Optional[str]]:
        """Peek into the open root object and classify the document.

        Returns the shape and the root key already consumed, if any.
        """
        cursor = self._cursor
        if cursor.peek() is not TokenKind.NAME:
            # Empty root object
            return DocumentShape.BARE_BODY, None
        name = cursor.next_name()
        if name == MappingName.MAPPINGS:
            return DocumentShape.WRAPPED, name
        if name == MappingName.PROPERTIES:
            return DocumentShape.BARE_BODY, name
        if cursor.peek() is not TokenKind.BEGIN_OBJECT:
            # A scalar type setting (e.g. "dynamic": "strict") opens a bare body
            return DocumentShape.BARE_BODY, name
        return DocumentShape.SINGLE_NAMED_TYPE, name

    def _read_type(self, type_name: Optional[str]) -> None:
        self._cursor.begin_object()
        self._walk_type_members(type_name)
        self._cursor.end_object()

    def _walk_type_members(self, type_name: Optional[str], name: Optional[str] = None) -> None:
        """Consume the members of an open type body up to its closing token.

        ``name`` is a member key the caller has already consumed.
        """
        cursor = self._cursor
        found = False
        while True:
            if name is None:
                if cursor.peek() is TokenKind.END_OBJECT:
                    break
                name = cursor.next_name()
            if name == MappingName.PROPERTIES and not found:
                found = True
                cursor.begin_object()
                self._read_field_mappings(type_name)
                cursor.end_object()
            else:
                logger.debug("Skipping type-level key '%s'", name)
                cursor.skip_value()
            name = None

        if not found:
            if self._options.strict:
                raise MissingPropertiesError(type_name)
            logger.debug("No properties block for type %r, no fields read", type_name)

    def _read_field_mappings(self, type_name: Optional[str], parent: Optional[str] = None) -> None:
        """Read every field entry of an open properties object."""
        cursor = self._cursor
        while cursor.peek() is TokenKind.NAME:
            name = self._next_field_name()
            path = name if parent is None else f"{parent}.{name}"
            cursor.begin_object()
            self._read_field(type_name, name, path)
            cursor.end_object()

    def _read_field(self, type_name: Optional[str], name: str, path: str) -> None:
        """Read one open field attribute object.

        The first property pair decides whether this is a multi-field
        declaration or a plain field.
        """
        cursor = self._cursor
        if cursor.peek() is not TokenKind.NAME:
            self._add_field(type_name, path)
            return

        property_name = cursor.next_name()
        if cursor.peek() in _SCALAR_KINDS:
            value = cursor.next_string()
            if value == MappingName.MULTI_FIELD:
                self._handle_multi_field(type_name, name, path)
                return
            field = self._add_field(type_name, path)
            set_property(property_name, value, field)
        else:
            field = self._add_field(type_name, path)
            self._read_structured_property(property_name, type_name, path)
        self._handle_field_attributes(field, type_name, path)

    def _handle_multi_field(self, type_name: Optional[str], name: str, path: str) -> None:
        """Expand the ``fields`` block of a multi-field into one record per entry.

        The entry named like the outer field keeps the outer name; every
        other entry is appended as ``<outer>.<inner>``.
        """
        cursor = self._cursor
        while cursor.peek() is TokenKind.NAME:
            key = cursor.next_name()
            if key != MappingName.FIELDS:
                logger.debug("Skipping multi-field key '%s' of '%s'", key, path)
                cursor.skip_value()
                continue
            cursor.begin_object()
            while cursor.peek() is not TokenKind.END_OBJECT:
                inner_name = self._next_field_name()
                inner_path = path if inner_name == name else f"{path}.{inner_name}"
                field = self._add_field(type_name, inner_path)
                cursor.begin_object()
                self._handle_field_attributes(field)
                cursor.end_object()
            cursor.end_object()

    def _handle_field_attributes(
        self,
        field: FieldAttributes,
        type_name: Optional[str] = None,
        path: Optional[str] = None,
    ) -> None:
        """Apply property pairs to ``field`` until its attribute object closes.

        Nested ``properties`` are only followed when ``path`` is given.
        """
        cursor = self._cursor
        while cursor.peek() is not TokenKind.END_OBJECT:
            property_name = cursor.next_name()
            if cursor.peek() in _SCALAR_KINDS:
                set_property(property_name, cursor.next_string(), field)
            elif path is not None:
                self._read_structured_property(property_name, type_name, path)
            else:
                cursor.skip_value()

    def _read_structured_property(self, property_name: str, type_name: Optional[str], path: str) -> None:
        """Consume an object/array/null property value of a plain field."""
        cursor = self._cursor
        if (
            property_name == MappingName.PROPERTIES
            and self._options.expand_object_fields
            and cursor.peek() is TokenKind.BEGIN_OBJECT
        ):
            cursor.begin_object()
            self._read_field_mappings(type_name, parent=path)
            cursor.end_object()
        else:
            cursor.skip_value()

    def _next_field_name(self) -> str:
        name = self._cursor.next_name()
        if not name:
            raise MalformedMappingError("Empty field name in properties block")
        return name

    def _add_field(self, type_name: Optional[str], path: str) -> FieldAttributes:
        field = FieldAttributes(name=qualify_name(type_name, path))
        self._fields.append(field)
        return field
