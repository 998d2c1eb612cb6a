"""Scene interface and the manager that owns and switches scenes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


class Scene(ABC):
    """Base class for a scene; subclasses supply the frame callbacks."""

    def __init__(self, core: Any = None, name: str = "") -> None:
        self.core = core
        self.scene_name = name
        self.engine_ui: Any = None
        self.scene_manager: Optional[SceneManager] = None

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the scene's resources."""

    @abstractmethod
    def update(self) -> None:
        """Advance the scene by one frame."""

    @abstractmethod
    def draw(self) -> None:
        """Issue the scene's draw calls."""

    @abstractmethod
    def clean_up(self) -> None:
        """Release the scene's resources."""

    def model_pre_draw(self) -> None:
        """Work done before models are drawn; nothing by default."""


SceneFactory = Callable[[Any], Scene]


class SceneManager:
    """Creates the first scene, switches to reserved scenes and drives the current one."""

    def __init__(
        self,
        initial_scene: SceneFactory,
        core: Any = None,
        engine_ui: Any = None,
    ) -> None:
        self._initial_scene = initial_scene
        self.core = core
        self.engine_ui = engine_ui
        self._current: Optional[Scene] = None
        self._next: Optional[Scene] = None

    @property
    def current_scene(self) -> Optional[Scene]:
        """The scene being updated and drawn, if any."""
        return self._current

    @property
    def next_scene(self) -> Optional[Scene]:
        """The scene reserved for the next update, if any."""
        return self._next

    def _attach(self, scene: Scene) -> None:
        scene.scene_manager = self
        if self.engine_ui is not None:
            scene.engine_ui = self.engine_ui

    def initialize(self) -> None:
        """Create, wire up and initialise the initial scene."""
        scene = self._initial_scene(self.core)
        self._attach(scene)
        scene.initialize()
        self._current = scene

    def update(self) -> None:
        """Switch to a reserved scene if there is one, then update the current scene."""
        if self._next is not None:
            self._switch_to_next_scene()
        if self._current is not None:
            self._current.update()

    def draw(self) -> None:
        """Draw the current scene."""
        if self._current is not None:
            self._current.draw()

    def set_next_scene(self, scene: Scene) -> None:
        """Reserve a scene to take over on the next update."""
        self._next = scene

    def close(self) -> None:
        """Clean up and drop the current scene."""
        if self._current is not None:
            self._current.clean_up()
            self._current = None

    def _switch_to_next_scene(self) -> None:
        self.close()
        scene, self._next = self._next, None
        self._current = scene
        self._attach(scene)
        scene.initialize()

    def __enter__(self) -> SceneManager:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()