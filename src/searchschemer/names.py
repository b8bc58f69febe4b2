"""Reserved property and key names of a mapping document.

These constants prevent stringly-typed lookups in the reader and keep the
recognized mapping dialect in one place.
"""

from enum import Enum


class MappingName(str, Enum):
    """Recognized mapping literals."""

    # Document structure
    MAPPINGS = "mappings"
    PROPERTIES = "properties"
    FIELDS = "fields"

    # Field properties
    TYPE = "type"
    STORE = "store"
    INDEX = "index"
    OMIT_FREQ_AND_POSITIONS = "omit_freq_and_positions"
    OMIT_NORMS = "omit_norms"
    BOOST = "boost"

    # Type value marking a multi-field declaration
    MULTI_FIELD = "multi_field"
