"""Tests for the interactive demo state handling."""

from rich.panel import Panel

from cellselect import Cell, Full
from interactive_demo import SELECTIONS, InteractiveDemo


class TestInteractiveDemo:
    """Tests for resizing and cycling without a terminal."""

    def test_initial_state(self) -> None:
        """The demo starts on the first selector."""
        demo = InteractiveDemo({"full": Full(), "cell": Cell(0, 0)}, count_rows=2, count_columns=3)
        assert demo.selector == Full()
        assert isinstance(demo.generate_display(), Panel)

    def test_resize_never_below_zero(self) -> None:
        """Shrinking stops at an empty extent."""
        demo = InteractiveDemo({"full": Full()}, count_rows=1, count_columns=1)
        demo.resize(-1, -1)
        demo.resize(-1, 0)
        assert (demo.count_rows, demo.count_columns) == (0, 0)
        assert isinstance(demo.generate_display(), Panel)

    def test_cycle_wraps(self) -> None:
        """Cycling wraps around in both directions."""
        demo = InteractiveDemo({"full": Full(), "cell": Cell(0, 0)})
        demo.cycle(-1)
        assert demo.selector == Cell(0, 0)
        demo.cycle(1)
        assert demo.selector == Full()

    def test_every_sample_renders(self) -> None:
        """All bundled selections display on the default extent."""
        demo = InteractiveDemo(SELECTIONS)
        for _ in SELECTIONS:
            assert isinstance(demo.generate_display(), Panel)
            demo.cycle(1)
