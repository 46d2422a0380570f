"""Navigation shell for the admin area"""

from dataclasses import dataclass
from typing import List, Tuple

DASHBOARD_HREF = "/admin/dashboard"


@dataclass(frozen=True)
class NavItem:
    name: str
    href: str


ADMIN_NAVIGATION: Tuple[NavItem, ...] = (
    NavItem("Dashboard", DASHBOARD_HREF),
    NavItem("Users", "/admin/users"),
    NavItem("Companies", "/admin/companies"),
    NavItem("Recruitment master", "/admin/recruitment-master"),
    NavItem("Roles", "/admin/roles"),
    NavItem("Banners", "/admin/banners"),
    NavItem("Monitoring", "/admin/monitoring"),
    NavItem("Settlements", "/admin/settlements"),
    NavItem("Analytics", "/admin/analytics"),
    NavItem("Settings", "/admin/settings"),
)


def is_active(href: str, location: str) -> bool:
    """The dashboard matches exactly; every other item matches by prefix"""
    if href == DASHBOARD_HREF:
        return location == DASHBOARD_HREF
    return location.startswith(href)


class NavigationShell:
    """Header chrome state: the current location and the mobile menu"""

    def __init__(self, location: str = DASHBOARD_HREF, items: Tuple[NavItem, ...] = ADMIN_NAVIGATION):
        self.location = location
        self.items = items
        self.menu_open = False

    def toggle_menu(self) -> bool:
        self.menu_open = not self.menu_open
        return self.menu_open

    def navigate(self, href: str) -> None:
        # Following a link closes the mobile menu
        self.location = href
        self.menu_open = False

    @property
    def active_items(self) -> List[NavItem]:
        return [item for item in self.items if is_active(item.href, self.location)]
