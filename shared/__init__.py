from .widget_container import *
