"""Built-in popular images offered when the search prefix is empty."""

from __future__ import annotations

from typing import NamedTuple

from hubsearch.domain.models import SearchResultItem
from hubsearch.i18n import I18nService


class _PopularImage(NamedTuple):
    name: str
    star_count: int
    message_key: str
    default_description: str
    is_automated: bool = False
    is_trusted: bool = False
    is_official: bool = True


POPULAR_IMAGES: tuple[_PopularImage, ...] = (
    _PopularImage(
        "redis", 1300, "hub_search.redis",
        "Redis is an open source key-value store that functions as a data structure server.",
    ),
    _PopularImage(
        "ubuntu", 2600, "hub_search.ubuntu",
        "Ubuntu is a Debian-based Linux operating system based on free software.",
    ),
    _PopularImage(
        "wordpress", 582, "hub_search.wordpress",
        "The WordPress rich content management system can utilize plugins, widgets, and themes.",
    ),
    _PopularImage(
        "mysql", 1300, "hub_search.mysql",
        "MySQL is a widely used, open-source relational database management system (RDBMS).",
    ),
    _PopularImage(
        "mongo", 1100, "hub_search.mongodb",
        "MongoDB document databases provide high availability and easy scalability.",
    ),
    _PopularImage("centos", 1600, "hub_search.centos", "The official build of CentOS."),
    _PopularImage(
        "node", 1200, "hub_search.node",
        "Node.js is a JavaScript-based platform for server-side and networking applications.",
    ),
    _PopularImage("nginx", 1600, "hub_search.nginx", "Official build of Nginx."),
    _PopularImage(
        "postgres", 1200, "hub_search.postgres",
        "The PostgreSQL object-relational database system provides reliability and data integrity.",
    ),
    _PopularImage(
        "microsoft/aspnet", 277, "hub_search.aspnet",
        "ASP.NET is an open source server-side Web application framework",
        is_automated=True,
        is_trusted=True,
        is_official=False,
    ),
)


def popular_images(i18n: I18nService, *, locale: str | None = None) -> list[SearchResultItem]:
    """Return a new list of the popular images with localized descriptions."""

    return [
        SearchResultItem(
            name=image.name,
            is_automated=image.is_automated,
            is_trusted=image.is_trusted,
            is_official=image.is_official,
            star_count=image.star_count,
            description=i18n.gettext(image.message_key, image.default_description, locale=locale),
        )
        for image in POPULAR_IMAGES
    ]


__all__ = ["POPULAR_IMAGES", "popular_images"]
