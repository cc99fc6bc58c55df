"""
Layout - fits the maze into the window with square cells
"""


class Layout:
    """
    Pixel geometry of the maze inside a viewport.

    The maze keeps one spare cell of padding on its tighter axis and is
    centered with horizontal/vertical margins.
    """
    def __init__(self):
        self.cell_size = 0.0
        self.h_margin = 0.0
        self.v_margin = 0.0
        self.offset_y = 0

    def fit(self, width, height, cols, rows, offset_y=0):
        """
        Recalculate cell size and margins

        Args:
            width, height: Viewport size in pixels
            cols, rows: Maze dimensions
            offset_y: Pixels above the viewport (e.g. a status panel)

        Returns:
            float: The new cell size
        """
        # Compare aspect ratios without dividing: width/height < cols/rows
        if width * rows < height * cols:
            self.cell_size = width / (cols + 1)
        else:
            self.cell_size = height / (rows + 1)

        self.h_margin = (width - cols * self.cell_size) / 2
        self.v_margin = (height - rows * self.cell_size) / 2
        self.offset_y = offset_y
        return self.cell_size

    def cell_origin(self, x, y):
        """Top-left pixel of a cell"""
        return (self.h_margin + x * self.cell_size,
                self.offset_y + self.v_margin + y * self.cell_size)

    def cell_center(self, x, y):
        """Center pixel of a cell"""
        ox, oy = self.cell_origin(x, y)
        half = self.cell_size / 2
        return ox + half, oy + half

    def cell_rect(self, x, y, pad_ratio=0.1):
        """
        Rectangle inside a cell, inset by pad_ratio of the cell size

        Returns:
            tuple: (left, top, width, height)
        """
        ox, oy = self.cell_origin(x, y)
        pad = self.cell_size * pad_ratio
        size = self.cell_size - pad * 2
        return ox + pad, oy + pad, size, size
