#!/usr/bin/env python3
"""
Example usage of the conway package.
"""

from conway import GameOfLife, PatternLibrary


def main():
    """Demonstrate programmatic usage of the conway package."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    # Place the glider near the top-left corner of a 10x10 grid
    game = GameOfLife(glider.to_grid(10, 10, offset_row=1, offset_col=1))

    print("Initial state:")
    print(game.grid, end="")
    print(f"Population: {game.population}")
    print()

    for _ in range(8):
        game.step()
        print(f"Generation {game.generation}:")
        print(game.grid, end="")
        print(f"Population: {game.population}")

        if game.is_extinct:
            print("Extinct!")
            break

        print()


if __name__ == "__main__":
    main()
