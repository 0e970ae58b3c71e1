"""Menu registries.

Plugins contribute menu entries by observing the registry's build event
(``Menu.Reporting.addItems`` and friends), which is dispatched the first time
the menu is requested. Renames and URL edits are recorded separately and
applied after every entry is in place, so a plugin can rename an entry that a
plugin loaded after it adds.
"""

from loguru import logger

from analytics_core.event_dispatcher import CoreEvents, EventDispatcher

from .models import MenuEntry, MenuItem, MenuUrl


class MenuRegistry:
    """Collects menu entries and builds them into an ordered tree.

    Attributes:
        dispatcher: Dispatcher used to post the build event
        build_event: Event dispatched once, with ``[registry]``, before the first build
        default_order: Order for entries added without one
    """

    def __init__(self, dispatcher: EventDispatcher, build_event: str, default_order: int = 10):
        self.dispatcher = dispatcher
        self.build_event = build_event
        self.default_order = default_order
        self._entries: list[MenuEntry] = []
        self._renames: list[tuple[str, str | None, str, str | None]] = []
        self._edits: list[tuple[str, str | None, MenuUrl]] = []
        self._build_event_posted = False

    def add(
        self,
        main: str,
        sub: str | None,
        url: MenuUrl,
        displayed_for_current_user: bool = True,
        order: int | None = None,
        tooltip: str | None = None,
    ) -> None:
        """Add a menu entry.

        Args:
            main: Top-level entry name
            sub: Submenu entry name, or None for a top-level entry
            url: Target URL, as a string or a dict of query parameters
            displayed_for_current_user: Entries the current user may not see are dropped
            order: Sort key; lower comes first
            tooltip: Optional tooltip text
        """
        self._add_entry(main, sub, url, displayed_for_current_user, order, tooltip, is_html=False)

    def _add_entry(
        self,
        main: str,
        sub: str | None,
        url: MenuUrl,
        displayed_for_current_user: bool,
        order: int | None,
        tooltip: str | None,
        is_html: bool,
    ) -> None:
        if not displayed_for_current_user:
            logger.trace(f"Menu entry {main}/{sub} hidden for current user")
            return
        self._entries.append(
            MenuEntry(
                main=main,
                sub=sub,
                url=url,
                order=self.default_order if order is None else order,
                tooltip=tooltip,
                is_html=is_html,
            )
        )

    def rename(self, main: str, sub: str | None, new_main: str, new_sub: str | None) -> None:
        """Rename an entry. Applied when the menu is built."""
        self._renames.append((main, sub, new_main, new_sub))

    def edit_url(self, main: str, sub: str | None, url: MenuUrl) -> None:
        """Change the URL of an entry. Applied when the menu is built."""
        self._edits.append((main, sub, url))

    def get(self) -> dict[str, MenuItem]:
        """Build and return the menu, ordered by ``order`` at every level."""
        if not self._build_event_posted:
            # Set first so an observer calling get() doesn't post the event again
            self._build_event_posted = True
            try:
                self.dispatcher.dispatch(self.build_event, [self])
            except Exception:
                # Post again on the next get() instead of serving a menu without plugin entries
                self._build_event_posted = False
                raise

        menu: dict[str, MenuItem] = {}
        for entry in self._entries:
            self._build_item(menu, entry)
        self._apply_edits(menu)
        self._apply_renames(menu)
        return self._apply_ordering(menu)

    def reset(self) -> None:
        """Forget all entries, edits and renames, and post the build event again next time."""
        self._entries.clear()
        self._renames.clear()
        self._edits.clear()
        self._build_event_posted = False

    @staticmethod
    def _build_item(menu: dict[str, MenuItem], entry: MenuEntry) -> None:
        existing = menu.get(entry.main)
        if existing is None or not entry.sub:
            menu[entry.main] = MenuItem(
                name=entry.main,
                url=entry.url,
                order=entry.order,
                tooltip=entry.tooltip,
                is_html=entry.is_html,
                children=existing.children if existing is not None else {},
            )
        if entry.sub:
            menu[entry.main].children[entry.sub] = MenuItem(
                name=entry.sub,
                url=entry.url,
                order=entry.order,
                tooltip=entry.tooltip,
                is_html=entry.is_html,
            )

    def _apply_edits(self, menu: dict[str, MenuItem]) -> None:
        for main, sub, url in self._edits:
            item = menu.get(main)
            if item is None:
                continue
            if not sub:
                item.url = url
            elif sub in item.children:
                item.children[sub].url = url

    def _apply_renames(self, menu: dict[str, MenuItem]) -> None:
        for main, sub, new_main, new_sub in self._renames:
            item = menu.get(main)
            if item is None:
                continue
            if not sub:
                del menu[main]
                item.name = new_main
                menu[new_main] = item
            elif sub in item.children:
                child = item.children.pop(sub)
                child.name = new_sub or sub
                target = menu.get(new_main or main)
                if target is None:
                    target = MenuItem(name=new_main, url=child.url, order=child.order)
                    menu[new_main] = target
                target.children[child.name] = child

    @staticmethod
    def _apply_ordering(menu: dict[str, MenuItem]) -> dict[str, MenuItem]:
        ordered = dict(sorted(menu.items(), key=lambda pair: pair[1].order))
        for item in ordered.values():
            item.children = dict(sorted(item.children.items(), key=lambda pair: pair[1].order))
        return ordered


class MainMenu(MenuRegistry):
    """The reporting menu."""

    def __init__(self, dispatcher: EventDispatcher, default_order: int = 10):
        super().__init__(dispatcher, CoreEvents.MENU_REPORTING_ADD_ITEMS, default_order)


class AdminMenu(MenuRegistry):
    """The administration menu."""

    def __init__(self, dispatcher: EventDispatcher, default_order: int = 10):
        super().__init__(dispatcher, CoreEvents.MENU_ADMIN_ADD_ITEMS, default_order)


class TopMenu(MenuRegistry):
    """The top bar menu. Entries can carry raw markup instead of a URL."""

    def __init__(self, dispatcher: EventDispatcher, default_order: int = 10):
        super().__init__(dispatcher, CoreEvents.MENU_TOP_ADD_ITEMS, default_order)

    def add_html(
        self,
        name: str,
        html: str,
        displayed_for_current_user: bool = True,
        order: int | None = None,
        tooltip: str | None = None,
    ) -> None:
        """Add an entry whose ``url`` holds markup supplied by a plugin."""
        self._add_entry(name, None, html, displayed_for_current_user, order, tooltip, is_html=True)
