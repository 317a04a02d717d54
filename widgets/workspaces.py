from typing import Optional

from loguru import logger

from services.channel import CoalescingChannel
from services.input_mapper import (
    gesture_from_gdk,
    intent_for_button,
    intent_for_scroll,
)
from services.workspace_listener import WorkspaceListener
from services.workspaces import (
    WorkspaceDirectory,
    WorkspaceSetState,
    WorkspaceSynchronizer,
)
from shared.widget_container import EventBoxWidget, HoverButton


class WorkspacesWidget(EventBoxWidget):
    """A row of workspace buttons, scrollable to cycle through workspaces."""

    def __init__(
        self,
        widget_config: Optional[dict] = None,
        directory: Optional[WorkspaceDirectory] = None,
        **kwargs,
    ):
        self.ws_config = (widget_config or {}).get("workspaces", {})

        super().__init__(
            name="workspaces-container",
            events=["scroll", "smooth-scroll"],
            spacing=self.ws_config.get("spacing", 10),
            config=self.ws_config,
            **kwargs,
        )
        self.box.set_name("workspaces")

        if directory is None:
            from services.hyprland import HyprlandDirectory

            directory = HyprlandDirectory()

        self.synchronizer = WorkspaceSynchronizer(directory)
        self.synchronizer.connect_changed(self.render)

        # count and focus coalesce independently
        self.channel = CoalescingChannel(
            self.synchronizer.apply_directory_event, capacity=2
        )
        self.listener = WorkspaceListener(directory, self.channel)

        self.buttons = []
        self.render(self.synchronizer.state)

        self.connect("scroll-event", self.on_scroll)
        self.connect("destroy", self.on_destroy)

        self.listener.start()

    def format_label(self, index: int) -> str:
        ws_id = index + 1
        icon = self.ws_config.get("icon_map", {}).get(str(ws_id))
        if icon:
            return icon
        return self.ws_config.get("default_label_format", "{id}").format(
            id=ws_id, index=index
        )

    def make_button(self, index: int) -> HoverButton:
        button = HoverButton(
            label=self.format_label(index),
            style_classes="workspace-button",
        )
        button.connect(
            "clicked",
            lambda *_: self.synchronizer.apply_user_intent(intent_for_button(index)),
        )
        return button

    def render(self, state: WorkspaceSetState):
        if len(self.buttons) != state.total_workspaces:
            self.buttons = [self.make_button(i) for i in range(state.total_workspaces)]
            self.box.children = self.buttons

        for index, button in enumerate(self.buttons):
            if index + 1 == state.focus_at:
                button.add_style_class("active")
            else:
                button.remove_style_class("active")

    def on_scroll(self, _, event):
        direction = event.direction.value_nick
        gesture = gesture_from_gdk(direction, event.delta_y)
        if gesture is None:
            return False

        intent = intent_for_scroll(
            gesture, reverse=self.ws_config.get("reverse_scroll", False)
        )
        if intent is not None:
            self.synchronizer.apply_user_intent(intent)
        return True

    def on_destroy(self, *_):
        logger.info("[Workspaces] Stopping workspace listener")
        self.listener.stop()
        self.channel.close()
