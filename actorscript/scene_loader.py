# actorscript/scene_loader.py
"""Scene loader: actors and rotation settings from YAML or JSON files."""

import json
import logging
import os
from typing import Dict, List, Optional

import yaml

from actorscript.clock import FrameClock
from actorscript.commands.validators import require_number, require_quaternion, require_vector3
from actorscript.config import RotationConfig
from actorscript.registry import ActorRegistry
from actorscript.utils.quaternion import Quaternion

logger = logging.getLogger(__name__)


class SceneLoader:
    """Loads scenes from YAML or JSON files."""

    @staticmethod
    def load(filepath: str) -> Dict:
        """Load a scene from file.

        Args:
            filepath: Path to scene file (.yaml, .yml or .json)

        Returns:
            dict: Scene data with name, dt (None when unset), actors and config

        Raises:
            ValueError: Unsupported file extension
            InvalidArgument: An actor definition is malformed
        """
        _, ext = os.path.splitext(filepath)

        with open(filepath, 'r') as f:
            if ext in ['.yaml', '.yml']:
                data = yaml.safe_load(f)
            elif ext == '.json':
                data = json.load(f)
            else:
                raise ValueError(f"Unsupported file format: {ext}")

        data = data or {}
        logger.info(f"Loaded scene: {data.get('name', 'Unknown')}")

        return {
            "name": data.get("name", "Untitled Scene"),
            "dt": data.get("dt"),
            "actors": SceneLoader._parse_actors(data.get("actors", [])),
            "config": data.get("config", {}),
        }

    @staticmethod
    def _parse_rotation(definition, field_name) -> Optional[Quaternion]:
        """Parse a rotation given as {yaw, pitch, roll} radians or [x, y, z, w]."""
        value = definition.get(field_name)
        if value is None:
            return None
        if isinstance(value, dict):
            return Quaternion.from_euler(
                require_number(f"{field_name}.pitch", value.get("pitch", 0.0)),
                require_number(f"{field_name}.yaw", value.get("yaw", 0.0)),
                require_number(f"{field_name}.roll", value.get("roll", 0.0)),
            )
        return require_quaternion(field_name, value, tolerance=1e-3)

    @staticmethod
    def _parse_actors(actors_data: List[Dict]) -> List[Dict]:
        """Parse actor definitions.

        Args:
            actors_data: List of actor definition dicts

        Returns:
            list: Actor configs with numpy positions and Quaternion rotations
        """
        actors = []

        for index, actor_def in enumerate(actors_data):
            actor_id = str(actor_def.get("id", f"actor_{index}"))
            rotation = SceneLoader._parse_rotation(actor_def, "rotation")
            spawn_rotation = SceneLoader._parse_rotation(actor_def, "spawn_rotation")

            actors.append({
                "id": actor_id,
                "position": require_vector3("position", actor_def.get("position", [0.0, 0.0, 0.0])),
                "rotation": rotation,
                # Actors spawn facing the way they were placed unless told otherwise
                "spawn_rotation": spawn_rotation if spawn_rotation is not None else rotation,
                "local_rotation": SceneLoader._parse_rotation(actor_def, "local_rotation"),
            })

        return actors

    @staticmethod
    def build(scene: Dict):
        """Create the runtime objects for a loaded scene.

        Args:
            scene: Result of ``SceneLoader.load``

        Returns:
            tuple: (ActorRegistry, FrameClock, RotationConfig)
        """
        config = RotationConfig.from_dict(scene.get("config"))
        registry = ActorRegistry()
        for actor in scene.get("actors", []):
            registry.add_actor(
                actor["id"],
                position=actor["position"],
                rotation=actor["rotation"],
                spawn_rotation=actor["spawn_rotation"],
                local_rotation=actor["local_rotation"],
            )
        dt = scene.get("dt")
        clock = FrameClock(dt if dt is not None else config.default_dt)
        logger.info(f"Built scene '{scene.get('name')}' with {len(registry)} actors")
        return registry, clock, config

    @staticmethod
    def list_scenes(directory: str) -> List[str]:
        """List scene files in a directory."""
        if not os.path.exists(directory):
            return []
        return sorted(
            filename for filename in os.listdir(directory)
            if filename.endswith(('.yaml', '.yml', '.json'))
        )
