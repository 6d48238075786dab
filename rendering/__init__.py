from .canvas import Canvas
from .raster import draw_line, draw_polyline, fill_polygon

# rendering.preview pulls in matplotlib and Pillow; import it explicitly where needed
