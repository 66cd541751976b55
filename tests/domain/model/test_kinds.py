from __future__ import annotations

import pytest

from eventarchive.domain.model import AssociationKind, EntityKind


def test_every_related_kind_has_exactly_one_association() -> None:
    related = [kind.related for kind in AssociationKind]

    assert sorted(related) == sorted(kind for kind in EntityKind if kind is not EntityKind.EVENT)


@pytest.mark.parametrize(
    ("association", "table", "column"),
    [
        (AssociationKind.EVENT_PERSON, "event_people", "person_id"),
        (AssociationKind.EVENT_MEDIA, "event_media", "media_id"),
        (AssociationKind.EVENT_ONLINE_RESOURCE, "event_online_resources", "online_resource_id"),
    ],
)
def test_association_tables(association: AssociationKind, table: str, column: str) -> None:
    assert association.table_name == table
    assert association.related_column == column


def test_labels_fall_back_per_kind() -> None:
    assert EntityKind.PERSON.label_field == "full_name"
    assert EntityKind.PLACE.label_field == "name"
    assert EntityKind.EVENT.fallback_label == "Untitled event"
