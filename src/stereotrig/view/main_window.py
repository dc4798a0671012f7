"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, side panels and the
three viewports.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects global actions (vehicle keys, Reset) to the store
   and every store snapshot to the viewports.
"""
import logging

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QSplitter
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QKeySequence, QCloseEvent

from stereotrig import config
from stereotrig.controller.interaction import BACKWARD_KEYS, FORWARD_KEYS, DragController
from stereotrig.controller.store import SceneStore
from stereotrig.model.state import SceneState
from stereotrig.view.widgets.plot_3d import CameraFeedViewport, OverviewViewport, SceneViewport

# Import Control Panels
from stereotrig.view.panels.control_panel import ControlPanel
from stereotrig.view.panels.objects_panel import ObjectsPanel
from stereotrig.view.panels.explanation_panel import ExplanationPanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: SceneStore) -> None:
        super().__init__()
        self.store: SceneStore = store
        self.drag_controller = DragController(self.store)

        self.setWindowTitle(config.VISIBLE_APP_NAME)
        self.resize(1500, 950)

        # --- MAIN SPLITTER (CONTENT AREA) ---
        splitter = QSplitter(Qt.Orientation.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Control Panels ---
        side = QWidget()
        side_layout = QVBoxLayout(side)
        side_layout.setContentsMargins(6, 6, 6, 6)

        self.control_panel = ControlPanel(self.store)
        self.objects_panel = ObjectsPanel(self.store)
        self.explanation_panel = ExplanationPanel(self.store)

        side_layout.addWidget(self.control_panel)
        side_layout.addWidget(self.objects_panel)
        side_layout.addWidget(self.explanation_panel, 1)
        splitter.addWidget(side)

        # --- RIGHT SIDE: Overview on top, camera feeds below ---
        views = QSplitter(Qt.Orientation.Vertical)
        self.overview = OverviewViewport(self.drag_controller)
        views.addWidget(self.overview)

        feeds = QSplitter(Qt.Orientation.Horizontal)
        self.feed_a = CameraFeedViewport("A")
        self.feed_b = CameraFeedViewport("B")
        feeds.addWidget(self.feed_a)
        feeds.addWidget(self.feed_b)
        views.addWidget(feeds)
        views.setSizes([600, 350])

        splitter.addWidget(views)

        # Set initial proportions (sidebar : 3D views)
        splitter.setSizes([380, 1120])

        # --- SIGNAL CONNECTIONS ---
        self.store.state_changed.connect(self.on_state_changed)
        self.store.reset_requested.connect(self.overview.go_home)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # Initial Render
        self.on_state_changed(self.store.state)

    @property
    def viewports(self) -> list[SceneViewport]:
        return [self.overview, self.feed_a, self.feed_b]

    def _create_actions(self) -> None:
        # Vehicle Actions (application-wide so they work while a viewport has focus)
        self.act_forward = QAction("Move Forward", self)
        self.act_forward.setShortcuts([QKeySequence(key) for key in FORWARD_KEYS])
        self.act_forward.setShortcutContext(Qt.ShortcutContext.ApplicationShortcut)
        self.act_forward.triggered.connect(lambda: self.store.step_vehicle(1))

        self.act_backward = QAction("Move Backward", self)
        self.act_backward.setShortcuts([QKeySequence(key) for key in BACKWARD_KEYS])
        self.act_backward.setShortcutContext(Qt.ShortcutContext.ApplicationShortcut)
        self.act_backward.triggered.connect(lambda: self.store.step_vehicle(-1))

        # Scene Actions
        self.act_reset = QAction("Reset", self)
        self.act_reset.setShortcut("Ctrl+R")
        self.act_reset.triggered.connect(self.store.reset)

        self.act_deselect = QAction("Clear Selection", self)
        self.act_deselect.setShortcut("Esc")
        self.act_deselect.triggered.connect(lambda: self.store.select_object(None))

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        for action in (self.act_forward, self.act_backward):
            self.addAction(action)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_exit)

        scene_menu = menu_bar.addMenu("&Scene")
        scene_menu.addAction(self.act_forward)
        scene_menu.addAction(self.act_backward)
        scene_menu.addSeparator()
        scene_menu.addAction(self.act_deselect)
        scene_menu.addAction(self.act_reset)

    # --- SLOTS ---

    def on_state_changed(self, state: SceneState) -> None:
        """Redraw every viewport from the new snapshot."""
        for viewport in self.viewports:
            viewport.update_scene(state)

        selected = state.selected_object
        selected_text = selected.display_name if selected else "none"
        self.statusBar().showMessage(
            f"Baseline {state.params.baseline:.1f} m  |  "
            f"Vehicle z {state.params.vehicle_z:.1f} m  |  "
            f"Selected: {selected_text}"
        )

    def closeEvent(self, event: QCloseEvent, /) -> None:
        """Close the PyVista plotters safely."""
        for viewport in self.viewports:
            viewport.plotter.close()
        event.accept()
