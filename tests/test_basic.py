"""Basic tests for the gameoflife package."""

from gameoflife import (
    Grid,
    PatternLibrary,
    count_live_cells,
    grid_to_text,
    next_generation,
    parse_pattern,
    simulate,
)


def test_grid_creation():
    """Test basic grid creation and cell access."""
    grid = Grid.empty(10, 10)
    assert grid.width == 10
    assert grid.height == 10
    assert grid.get_cell(0, 0) is False

    grid = grid.with_cell(5, 5, True)
    assert grid.get_cell(5, 5) is True


def test_pattern_library():
    """Test pattern library has some patterns."""
    library = PatternLibrary()
    patterns = library.list_patterns()
    assert len(patterns) > 0
    assert "Glider" in patterns


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    blinker = parse_pattern("...\nOOO\n...").cells
    assert count_live_cells(blinker) == 3

    # Step once - should become vertical
    vertical = next_generation(blinker)
    assert grid_to_text(vertical) == ".O.\n.O.\n.O."

    # Step again - should return to horizontal
    assert next_generation(vertical) == blinker
    assert simulate(blinker, 2) == blinker


def test_glider_end_to_end():
    """Test the glider survives a step and re-serializes unchanged."""
    text = ".O.\n..O\nOOO"
    pattern = parse_pattern(text)

    assert count_live_cells(pattern.cells) == 5
    assert grid_to_text(pattern.cells) == text
    assert grid_to_text(simulate(pattern.cells, 0)) == text
    assert count_live_cells(next_generation(pattern.cells)) > 0
