"""Textual TUI for browsing a generated sector.

Shows the hex map, an index of star systems in coordinate order and the
full details of the selected system.
"""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Footer, Header, Static

from ..models.sector import Sector
from ..models.star import Star
from ..utils.format import OutputType
from .renderer import SectorRenderer


class MapPanel(Static):
    """Widget to display the sector map."""

    def __init__(self, *args, **kwargs):
        """Initialize map panel."""
        super().__init__(*args, markup=False, **kwargs)
        self.renderer = SectorRenderer()
        self.border_title = "Map"

    def update_map(self, sector: Sector) -> None:
        self.update(self.renderer.render_map_with_coords(sector))


class StarList(Static):
    """Widget listing star systems, marking the selected one."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, markup=False, **kwargs)
        self.border_title = "Systems"

    def update_list(self, stars: list[Star], selected: int) -> None:
        lines = [
            f"{'>' if i == selected else ' '} {star.row:2d},{star.col:<2d} {star.name}"
            for i, star in enumerate(stars)
        ]
        self.update("\n".join(lines) or "No star systems")


class StarDetails(Static):
    """Widget showing the selected star's full description."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, markup=False, **kwargs)

    def show_star(self, star: Star | None) -> None:
        self.update(star.format(OutputType.TEXT) if star else "")


class SectorTUI(App):
    """Sector browser application."""

    ENABLE_COMMAND_PALETTE = False

    CSS = """
    #map_panel {
        height: auto;
        border: solid green;
    }

    #body_row {
        height: 1fr;
    }

    #star_list {
        width: 30;
        border: solid blue;
    }

    #details_container {
        width: 1fr;
        border: solid cyan;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("j,down", "next_star", "Next", show=True, priority=True),
        Binding("k,up", "previous_star", "Previous", show=True, priority=True),
    ]

    def __init__(self, sector: Sector, *args, **kwargs):
        """Initialize the TUI app.

        Args:
            sector: Generated sector to browse
        """
        super().__init__(*args, **kwargs)
        self.sector = sector
        self.stars = sector.sorted_by_coordinate()
        self.selected = 0
        self.map_panel = None
        self.star_list = None
        self.star_details = None

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header()

        self.map_panel = MapPanel(id="map_panel")
        yield self.map_panel

        with Horizontal(id="body_row"):
            self.star_list = StarList(id="star_list")
            yield self.star_list

            details_container = VerticalScroll(id="details_container")
            details_container.border_title = "Details"
            with details_container:
                self.star_details = StarDetails()
                yield self.star_details

        yield Footer()

    def on_mount(self) -> None:
        self.title = f"Sector {self.sector.rows}x{self.sector.cols}"
        if self.sector.seed is not None:
            self.sub_title = f"seed {self.sector.seed}"
        self.map_panel.update_map(self.sector)
        self.refresh_selection()

    def refresh_selection(self) -> None:
        """Redraw the star list and details for the current selection."""
        self.star_list.update_list(self.stars, self.selected)
        self.star_details.show_star(self.stars[self.selected] if self.stars else None)

    def action_next_star(self) -> None:
        if self.stars:
            self.selected = (self.selected + 1) % len(self.stars)
            self.refresh_selection()

    def action_previous_star(self) -> None:
        if self.stars:
            self.selected = (self.selected - 1) % len(self.stars)
            self.refresh_selection()
