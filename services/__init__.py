from .channel import CoalescingChannel
from .input_mapper import *
from .workspace_listener import WorkspaceListener
from .workspaces import *
