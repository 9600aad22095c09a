from .base import Renderer, OutputFile, write_files
from .html import HTMLRenderer
from .json import JSONRenderer
from .yaml import YAMLRenderer

RENDERERS = {
    'html': HTMLRenderer,
    'json': JSONRenderer,
    'yaml': YAMLRenderer,
}
