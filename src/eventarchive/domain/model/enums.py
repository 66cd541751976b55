"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntityKind(StrEnum):
    """Catalogued entity kinds, one table each."""

    EVENT = "event"
    PERSON = "person"
    GROUP = "group"
    PLACE = "place"
    ORGANIZATION = "organization"
    SOURCE = "source"
    MEDIA = "media"
    ONLINE_RESOURCE = "online_resource"

    @property
    def table_name(self) -> str:
        match self:
            case EntityKind.EVENT:
                return "events"
            case EntityKind.PERSON:
                return "people"
            case EntityKind.GROUP:
                return "groups"
            case EntityKind.PLACE:
                return "places"
            case EntityKind.ORGANIZATION:
                return "organizations"
            case EntityKind.SOURCE:
                return "sources"
            case EntityKind.MEDIA:
                return "media"
            case EntityKind.ONLINE_RESOURCE:
                return "online_resources"

    @property
    def label_field(self) -> str:
        """Column used as the human readable label of a row."""
        match self:
            case (
                EntityKind.EVENT
                | EntityKind.SOURCE
                | EntityKind.MEDIA
                | EntityKind.ONLINE_RESOURCE
            ):
                return "title"
            case EntityKind.PERSON:
                return "full_name"
            case EntityKind.GROUP | EntityKind.PLACE | EntityKind.ORGANIZATION:
                return "name"

    @property
    def fallback_label(self) -> str:
        match self:
            case EntityKind.EVENT:
                return "Untitled event"
            case EntityKind.PERSON:
                return "Unnamed person"
            case EntityKind.GROUP:
                return "Unnamed group"
            case EntityKind.PLACE:
                return "Unnamed place"
            case EntityKind.ORGANIZATION:
                return "Unnamed organization"
            case EntityKind.SOURCE:
                return "Untitled source"
            case EntityKind.MEDIA:
                return "Untitled media"
            case EntityKind.ONLINE_RESOURCE:
                return "Untitled online resource"


class AssociationKind(StrEnum):
    """Many-to-many links between an event and one related entity kind."""

    EVENT_PERSON = "event_person"
    EVENT_GROUP = "event_group"
    EVENT_PLACE = "event_place"
    EVENT_ORGANIZATION = "event_organization"
    EVENT_SOURCE = "event_source"
    EVENT_MEDIA = "event_media"
    EVENT_ONLINE_RESOURCE = "event_online_resource"

    @property
    def related(self) -> EntityKind:
        match self:
            case AssociationKind.EVENT_PERSON:
                return EntityKind.PERSON
            case AssociationKind.EVENT_GROUP:
                return EntityKind.GROUP
            case AssociationKind.EVENT_PLACE:
                return EntityKind.PLACE
            case AssociationKind.EVENT_ORGANIZATION:
                return EntityKind.ORGANIZATION
            case AssociationKind.EVENT_SOURCE:
                return EntityKind.SOURCE
            case AssociationKind.EVENT_MEDIA:
                return EntityKind.MEDIA
            case AssociationKind.EVENT_ONLINE_RESOURCE:
                return EntityKind.ONLINE_RESOURCE

    @property
    def table_name(self) -> str:
        return f"event_{self.related.table_name}"

    @property
    def related_column(self) -> str:
        return f"{self.related.value}_id"
