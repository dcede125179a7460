#!/usr/bin/env python3
"""
Example usage of the gameoflife package.
"""

from gameoflife import PatternLibrary, count_live_cells, grid_to_text, next_generation


def main():
    """Demonstrate programmatic usage of the gameoflife package."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    if glider:
        # Leave room for the glider to travel before it reaches the edge
        grid = glider.padded(4).cells

        print("Initial state:")
        print(grid_to_text(grid))
        print(f"Population: {count_live_cells(grid)}")
        print()

        for generation in range(1, 11):
            grid = next_generation(grid)
            print(f"Generation {generation}:")
            print(grid_to_text(grid))
            print(f"Population: {count_live_cells(grid)}")
            print()


if __name__ == "__main__":
    main()
