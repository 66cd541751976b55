from __future__ import annotations

import pytest

from eventarchive.domain.csv_import import DedupOutcome, DedupResolver
from eventarchive.domain.csv_import.dedup import rule_for
from eventarchive.domain.model import EntityKind, mapping_for
from tests.support.catalog import InMemoryEntityRepository


def _resolver(
    kind: EntityKind, repository: InMemoryEntityRepository | None = None
) -> tuple[DedupResolver, InMemoryEntityRepository]:
    repo = repository or InMemoryEntityRepository(kind)
    return DedupResolver(repo, mapping_for(kind), rule_for(kind)), repo


def test_case_and_whitespace_variants_share_identity() -> None:
    resolver, repository = _resolver(EntityKind.PERSON)

    assert resolver.resolve({"Nome completo": "  Maria Rossi "}) is DedupOutcome.INSERTED
    assert resolver.resolve({"Nome completo": "maria rossi"}) is DedupOutcome.MATCHED
    assert repository.count() == 1


def test_person_name_falls_back_to_first_and_last_name() -> None:
    resolver, repository = _resolver(EntityKind.PERSON)

    resolver.resolve({"Nome": "Maria", "Cognome": "Rossi"})
    outcome = resolver.resolve({"Nome completo": "MARIA ROSSI"})

    assert outcome is DedupOutcome.MATCHED
    assert repository.names("full_name") == ["Maria Rossi"]


def test_person_without_any_name_is_skipped() -> None:
    resolver, repository = _resolver(EntityKind.PERSON)

    outcome = resolver.resolve({"Nome completo": " ", "Ruolo": "Direttore"})

    assert outcome is DedupOutcome.SKIPPED
    assert repository.count() == 0


def test_place_identity_includes_city() -> None:
    resolver, repository = _resolver(EntityKind.PLACE)

    resolver.resolve({"Nome": "Teatro Comunale", "Città": "Bologna"})
    resolver.resolve({"Nome": "Teatro Comunale", "Città": "Bologna"})
    resolver.resolve({"Nome": "Teatro Comunale", "Città": "Firenze"})
    resolver.resolve({"Nome": "Teatro Comunale"})
    resolver.resolve({"Nome": "teatro comunale", "Città": ""})

    assert repository.count() == 3


def test_place_name_falls_back_to_city() -> None:
    resolver, repository = _resolver(EntityKind.PLACE)

    resolver.resolve({"Città": "Ferrara"})
    outcome = resolver.resolve({"Città": "Ferrara"})

    assert outcome is DedupOutcome.MATCHED
    assert repository.names("name") == ["Ferrara"]


def test_event_identity_includes_date() -> None:
    resolver, repository = _resolver(EntityKind.EVENT)

    resolver.resolve({"Titolo": "Concerto", "Data": "2024-05-01"})
    resolver.resolve({"Titolo": "concerto", "Data": "2024-05-01"})
    resolver.resolve({"Titolo": "Concerto", "Data": "2024-06-01"})

    assert repository.count() == 2


def test_match_leaves_existing_row_untouched() -> None:
    repository = InMemoryEntityRepository(EntityKind.GROUP)
    existing = repository.insert(
        {"source_record_id": "4", "name": "Banda Cittadina", "bio": "Fondata nel 1900"}
    )
    resolver, _ = _resolver(EntityKind.GROUP, repository)

    outcome = resolver.resolve({"Nome": "banda cittadina", "Biografia": "Altra bio"})

    assert outcome is DedupOutcome.MATCHED
    assert repository.rows[existing] == {
        "source_record_id": "4",
        "name": "Banda Cittadina",
        "bio": "Fondata nel 1900",
    }


def test_inserted_rows_carry_no_source_id() -> None:
    resolver, repository = _resolver(EntityKind.GROUP)

    resolver.resolve({"form_record_id": "99", "Nome": "Coro"})

    assert repository.source_id_map() == {}


def test_kinds_without_rule_are_rejected() -> None:
    with pytest.raises(ValueError, match="No dedup rule"):
        rule_for(EntityKind.MEDIA)
