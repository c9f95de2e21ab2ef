"""
Static site: routes, Jinja2 page renderers and the builder that writes them.
"""

from patterndiff.site.builder import SiteBuilder
from patterndiff.site.renderers import (
    BaseRenderer,
    CategoryPageRenderer,
    HomePageRenderer,
    NotFoundRenderer,
)
from patterndiff.site.routes import (
    build_routes,
    category_path,
    home_path,
    not_found_path,
    output_file,
    switch_version_path,
)

__all__ = [
    "SiteBuilder",
    "BaseRenderer",
    "CategoryPageRenderer",
    "HomePageRenderer",
    "NotFoundRenderer",
    "build_routes",
    "category_path",
    "home_path",
    "not_found_path",
    "output_file",
    "switch_version_path",
]
