"""Builders for in-memory checklist grids used across the tests."""

from compliance_parser.config import LayoutConfig


def put(grid, row, column, value):
    """Sets grid[row][column], growing the grid as needed."""
    while len(grid) <= row:
        grid.append([])
    cells = grid[row]
    while len(cells) <= column:
        cells.append(None)
    cells[column] = value


def fill_village(
    grid,
    layout: LayoutConfig,
    column: int,
    name,
    sec92=(),
    sec13=(),
    stage=None,
    published=None,
    days=None,
    personnel=None,
    name_row=None,
):
    """Writes one village column into a list-of-lists grid using the given layout."""
    put(grid, layout.village_name_row if name_row is None else name_row, column, name)
    for offset, value in enumerate(sec92):
        put(grid, layout.sec92_start_row + offset, layout.label_column, f"9(2) item {offset + 1}")
        put(grid, layout.sec92_start_row + offset, column, value)
    for offset, value in enumerate(sec13):
        put(grid, layout.sec13_start_row + offset, layout.label_column, f"13 item {offset + 1}")
        put(grid, layout.sec13_start_row + offset, column, value)
    if stage is not None:
        put(grid, layout.stage_row, column, stage)
    if published is not None:
        put(grid, layout.published_date_row, column, published)
    if days is not None:
        put(grid, layout.days_passed_row, column, days)
    for field_name, value in (personnel or {}).items():
        put(grid, getattr(layout, f"{field_name}_row"), column, value)
    return grid


def grid_to_sheet(ws, grid):
    """Copies a grid into an openpyxl worksheet (grid[0][0] -> A1)."""
    for row_index, cells in enumerate(grid):
        for column_index, value in enumerate(cells):
            if value is not None:
                ws.cell(row=row_index + 1, column=column_index + 1, value=value)
