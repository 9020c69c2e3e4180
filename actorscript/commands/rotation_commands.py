# actorscript/commands/rotation_commands.py
"""Rotation commands callable from scripts by name."""

from actorscript.commands.dispatch import CommandSpec
from actorscript.commands.validators import ArgSpec
from actorscript.utils.errors import success_dict


def _orientation(facade, message):
    yaw, pitch, roll = facade.get_yaw_pitch_roll()
    return success_dict(
        message,
        yaw=yaw,
        pitch=pitch,
        roll=roll,
        rotation=list(facade.get_rot().to_xyzw()),
    )


def cmd_get_yaw(facade, params):
    return {"ok": True, "yaw": facade.get_yaw()}


def cmd_get_pitch(facade, params):
    return {"ok": True, "pitch": facade.get_pitch()}


def cmd_get_roll(facade, params):
    return {"ok": True, "roll": facade.get_roll()}


def cmd_get_rot(facade, params):
    return {"ok": True, "rotation": list(facade.get_rot().to_xyzw())}


def cmd_get_spawn_rot(facade, params):
    return {"ok": True, "rotation": list(facade.get_spawn_rot().to_xyzw())}


def cmd_get_local_rot(facade, params):
    return {"ok": True, "rotation": list(facade.get_local_rot().to_xyzw())}


def cmd_set_yaw(facade, params):
    facade.set_yaw(params["yaw"])
    return _orientation(facade, "Yaw set")


def cmd_set_pitch(facade, params):
    facade.set_pitch(params["pitch"])
    return _orientation(facade, "Pitch set")


def cmd_set_roll(facade, params):
    facade.set_roll(params["roll"])
    return _orientation(facade, "Roll set")


def cmd_set_yaw_pitch_roll(facade, params):
    facade.set_yaw_pitch_roll(params["yaw"], params.get("pitch"), params.get("roll"))
    return _orientation(facade, "Rotation set")


def cmd_turn(facade, params):
    facade.turn(params["radians"], params.get("axis"))
    return _orientation(facade, "Turned")


def cmd_spin(facade, params):
    facade.spin(params["radians_per_second"], params.get("axis"))
    return _orientation(facade, "Spun")


def cmd_rotate(facade, params):
    facade.rotate(params["axis"], params["angle"])
    return _orientation(facade, "Rotated")


def cmd_apply_quaternion(facade, params):
    facade.apply_quaternion(params["quat"])
    return _orientation(facade, "Rotation applied in world space")


def cmd_apply_quaternion_self(facade, params):
    facade.apply_quaternion_self(params["quat"])
    return _orientation(facade, "Rotation applied in self space")


def cmd_set_rot(facade, params):
    facade.set_rot(params["rot"])
    return _orientation(facade, "Rotation set")


def cmd_reset_rot(facade, params):
    facade.reset_rot()
    return _orientation(facade, "Rotation reset")


def cmd_set_spawn_rot(facade, params):
    facade.set_spawn_rot(params["rot"])
    return success_dict("Spawn rotation set", rotation=list(facade.get_spawn_rot().to_xyzw()))


def cmd_reset_spawn_rot(facade, params):
    facade.reset_spawn_rot()
    return success_dict("Spawn rotation reset", rotation=list(facade.get_spawn_rot().to_xyzw()))


def cmd_set_local_rot(facade, params):
    facade.set_local_rot(params["rot"])
    return success_dict("Local rotation set", rotation=list(facade.get_local_rot().to_xyzw()))


def cmd_reset_local_rot(facade, params):
    facade.reset_local_rot()
    return success_dict("Local rotation reset", rotation=list(facade.get_local_rot().to_xyzw()))


def cmd_look_at(facade, params):
    turned = facade.look_at(params["target"], params["yaw_only"])
    return _orientation(facade, "Facing target") | {"turned": turned}


def cmd_look_dir(facade, params):
    turned = facade.look_dir(params["direction"], params["yaw_only"])
    return _orientation(facade, "Facing direction") | {"turned": turned}


def cmd_look_toward(facade, params):
    turned = facade.look_toward(params["target"], params["radians_per_second"], params["yaw_only"])
    return _orientation(facade, "Turning toward target") | {"turned": turned}


def cmd_look_toward_dir(facade, params):
    turned = facade.look_toward_dir(params["direction"], params["radians_per_second"], params["yaw_only"])
    return _orientation(facade, "Turning toward direction") | {"turned": turned}


def _yaw_only():
    return ArgSpec("yaw_only", "bool", required=False, default=False,
                   description="Only change heading; stay level")


def register_commands(dispatcher):
    """Register all rotation commands with the dispatcher."""

    dispatcher.register("getYaw", CommandSpec(
        handler=cmd_get_yaw, args=[], help_text="Current yaw in radians [0, 2pi)"
    ))
    dispatcher.register("getPitch", CommandSpec(
        handler=cmd_get_pitch, args=[], help_text="Current pitch in radians [-pi/2, pi/2]"
    ))
    dispatcher.register("getRoll", CommandSpec(
        handler=cmd_get_roll, args=[], help_text="Current roll in radians"
    ))
    dispatcher.register("getRot", CommandSpec(
        handler=cmd_get_rot, args=[], help_text="World rotation as (x, y, z, w)"
    ))
    dispatcher.register("getSpawnRot", CommandSpec(
        handler=cmd_get_spawn_rot, args=[], help_text="Spawn rotation as (x, y, z, w)"
    ))
    dispatcher.register("getLocalRot", CommandSpec(
        handler=cmd_get_local_rot, args=[], help_text="Parent-relative rotation as (x, y, z, w)"
    ))

    dispatcher.register("setYaw", CommandSpec(
        handler=cmd_set_yaw,
        args=[ArgSpec("yaw", "angle", description="Yaw in radians, wraps into [0, 2pi)")],
        help_text="Set yaw, keeping pitch and roll"
    ))
    dispatcher.register("setPitch", CommandSpec(
        handler=cmd_set_pitch,
        args=[ArgSpec("pitch", "angle", description="Pitch in radians, clamped to [-pi/2, pi/2]")],
        help_text="Set pitch, keeping yaw and roll"
    ))
    dispatcher.register("setRoll", CommandSpec(
        handler=cmd_set_roll,
        args=[ArgSpec("roll", "angle", description="Roll in radians")],
        help_text="Set roll, keeping yaw and pitch"
    ))
    dispatcher.register("setYawPitchRoll", CommandSpec(
        handler=cmd_set_yaw_pitch_roll,
        args=[
            ArgSpec("yaw", "angle", description="Yaw in radians"),
            ArgSpec("pitch", "angle", required=False, description="Pitch in radians (default 0)"),
            ArgSpec("roll", "angle", required=False, description="Roll in radians (default 0)"),
        ],
        help_text="Replace the rotation with yaw, pitch and roll"
    ))

    dispatcher.register("turn", CommandSpec(
        handler=cmd_turn,
        args=[
            ArgSpec("radians", "angle", description="Angle to turn"),
            ArgSpec("axis", "axis", required=False, description="Axis in the actor's frame (default up)"),
        ],
        help_text="Turn in the actor's own frame"
    ))
    dispatcher.register("spin", CommandSpec(
        handler=cmd_spin,
        args=[
            ArgSpec("radians_per_second", "float", description="Turn rate"),
            ArgSpec("axis", "axis", required=False, description="Axis in the actor's frame (default up)"),
        ],
        help_text="Turn at a rate for this tick; call every tick"
    ))
    dispatcher.register("rotate", CommandSpec(
        handler=cmd_rotate,
        args=[
            ArgSpec("axis", "axis", description="World-space axis"),
            ArgSpec("angle", "angle", description="Angle in radians"),
        ],
        help_text="Rotate about a world-space axis"
    ))
    dispatcher.register("applyQuaternion", CommandSpec(
        handler=cmd_apply_quaternion,
        args=[ArgSpec("quat", "quaternion", description="Unit quaternion (x, y, z, w)")],
        help_text="Apply a rotation in world space"
    ))
    dispatcher.register("applyQuaternionSelf", CommandSpec(
        handler=cmd_apply_quaternion_self,
        args=[ArgSpec("quat", "quaternion", description="Unit quaternion (x, y, z, w)")],
        help_text="Apply a rotation in the actor's own frame"
    ))

    dispatcher.register("setRot", CommandSpec(
        handler=cmd_set_rot,
        args=[ArgSpec("rot", "quaternion", description="Unit quaternion (x, y, z, w)")],
        help_text="Replace the world rotation"
    ))
    dispatcher.register("resetRot", CommandSpec(
        handler=cmd_reset_rot, args=[], help_text="Reset the world rotation to identity"
    ))
    dispatcher.register("setSpawnRot", CommandSpec(
        handler=cmd_set_spawn_rot,
        args=[ArgSpec("rot", "quaternion", description="Unit quaternion (x, y, z, w)")],
        help_text="Replace the spawn rotation"
    ))
    dispatcher.register("resetSpawnRot", CommandSpec(
        handler=cmd_reset_spawn_rot, args=[], help_text="Reset the spawn rotation to identity"
    ))
    dispatcher.register("setLocalRot", CommandSpec(
        handler=cmd_set_local_rot,
        args=[ArgSpec("rot", "quaternion", description="Unit quaternion (x, y, z, w)")],
        help_text="Replace the parent-relative rotation"
    ))
    dispatcher.register("resetLocalRot", CommandSpec(
        handler=cmd_reset_local_rot, args=[], help_text="Reset the parent-relative rotation to identity"
    ))

    dispatcher.register("lookAt", CommandSpec(
        handler=cmd_look_at,
        args=[ArgSpec("target", "target", description="Point (x, y, z) or actor id"), _yaw_only()],
        help_text="Face a point or actor immediately"
    ))
    dispatcher.register("lookDir", CommandSpec(
        handler=cmd_look_dir,
        args=[ArgSpec("direction", "vector3", description="World-space direction"), _yaw_only()],
        help_text="Face a direction immediately"
    ))
    dispatcher.register("lookToward", CommandSpec(
        handler=cmd_look_toward,
        args=[
            ArgSpec("target", "target", description="Point (x, y, z) or actor id"),
            ArgSpec("radians_per_second", "rate", description="Maximum turn rate"),
            _yaw_only(),
        ],
        help_text="Turn toward a point or actor at a limited rate; call every tick"
    ))
    dispatcher.register("lookTowardDir", CommandSpec(
        handler=cmd_look_toward_dir,
        args=[
            ArgSpec("direction", "vector3", description="World-space direction"),
            ArgSpec("radians_per_second", "rate", description="Maximum turn rate"),
            _yaw_only(),
        ],
        help_text="Turn toward a direction at a limited rate; call every tick"
    ))
