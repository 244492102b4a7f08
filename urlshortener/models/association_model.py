from dataclasses import dataclass


@dataclass(frozen=True)
class AssociationModel:
    """Represent one long URL to alias binding.

    Attributes:
        long_url (str):
            The case-folded original URL that the alias resolves to.
        alias (str):
            Unique opaque token identifying the association. Never
            regenerated once assigned.
        hit_count (int):
            Number of successful resolutions. Survives deactivation.
        active (bool):
            True when the alias resolves, False when soft-deleted.

    Example:
        >>> from dataclasses import replace
        >>> record = AssociationModel(long_url='http://example.com/a', alias='Gh71WPT')
        >>> record.hit_count, record.active
        (0, True)
        >>> replace(record, active=False).active
        False
    """

    long_url: str
    alias: str
    hit_count: int = 0
    active: bool = True
