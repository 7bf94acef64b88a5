"""Sector rendering: ASCII hex map plus per-star details."""

from ..models.sector import Sector
from ..models.star import Star
from ..utils.format import OutputType, header, table


class SectorRenderer:
    """Renders a sector as an ASCII map and as full text or markdown."""

    EMPTY_CELL = ".."

    def render_map(self, sector: Sector) -> str:
        """Render the sector grid as ASCII art.

        Output format (2 chars per cell):
        .. Ve .. .. Ka .. .. ..
        .. .. .. Th .. .. .. Ly
        ...

        Legend:
        - '..' = empty hex
        - 'Ve' = star system, labelled with the first two letters of its name

        Args:
            sector: Sector to render

        Returns:
            Multi-line ASCII art string, one line per row
        """
        grid = [[self.EMPTY_CELL] * sector.cols for _ in range(sector.rows)]

        for star in sector.stars:
            grid[star.row][star.col] = self._render_star_cell(star)

        return "\n".join(" ".join(row) for row in grid)

    def _render_star_cell(self, star: Star) -> str:
        return star.name[:2].ljust(2)

    def render_map_with_coords(self, sector: Sector) -> str:
        """Render map with column numbers on top and row numbers on the left."""
        map_str = self.render_map(sector)

        header_line = "   " + " ".join(f"{i:2d}" for i in range(sector.cols))
        lines = map_str.split("\n")
        numbered_lines = [f"{i:2d} {line}" for i, line in enumerate(lines)]

        return header_line + "\n" + "\n".join(numbered_lines)

    def render_summary(self, sector: Sector, t: OutputType) -> str:
        """Render a one-line-per-star index in coordinate order."""
        rows = [
            (f"{s.row},{s.col}", s.name, s.culture.value, str(len(s.worlds)), str(len(s.pois)))
            for s in sector.sorted_by_coordinate()
        ]
        return table(t, ("Hex", "Name", "Culture", "Worlds", "POIs"), rows)

    def render(self, sector: Sector, t: OutputType = OutputType.TEXT) -> str:
        """Render the whole sector: map, star index, then every star in coordinate order.

        Args:
            sector: Sector to render
            t: Output type

        Returns:
            Formatted sector text
        """
        title = f"Sector {sector.rows}x{sector.cols}"
        if sector.seed is not None:
            title += f" (seed {sector.seed})"

        out = header(t, 1, title)
        map_str = self.render_map_with_coords(sector)
        if t is OutputType.MARKDOWN:
            out += f"```\n{map_str}\n```\n\n"
        else:
            out += map_str + "\n\n"

        out += self.render_summary(sector, t)
        for star in sector.sorted_by_coordinate():
            out += star.format(t)

        return out
