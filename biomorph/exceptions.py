class BiomorphError(Exception):
    """Base for all biomorph exceptions."""

    pass


# High-level families
class ValidationError(BiomorphError):
    """Data validation failures."""

    pass


class ResourceError(BiomorphError):
    """Resource limit violations."""

    pass


class PopulationError(BiomorphError):
    """Population construction and access failures."""

    pass


class SessionStateError(BiomorphError):
    """Operation not allowed in the current session state."""

    pass


# Genome subtypes
class GenomeValidationError(ValidationError):
    """Gene vector has the wrong length or a gene outside its bounds."""

    pass


class GenomeIndexError(ValidationError):
    """Gene index outside the genome."""

    pass


# Resource subtypes
class SegmentCapacityError(ResourceError):
    """Expansion would produce more segments than a segment list can hold."""

    pass


# Population subtypes
class PopulationIndexError(PopulationError):
    """Biomorph index outside the population."""

    pass
