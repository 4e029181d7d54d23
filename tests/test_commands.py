"""
Tests for commands and the authorization / audit decorators.
"""

from smarthome.core.activity_log import ActivityLog
from smarthome.models.devices import Light
from smarthome.orchestration.commands import (
    CommandKind,
    TurnOnLightCommand,
    TurnOffLightCommand,
    LockDoorCommand,
    UnlockDoorCommand,
)
from smarthome.orchestration.decorators import (
    AuditWrapper,
    AuthorizationWrapper,
    LightsOffWhileDoorUnlockedRule,
    SafetyRule,
)

WARNING = "Security Warning: Cannot turn off lights while front door is unlocked"


class TestDeviceCommands:
    def test_light_commands_are_inverses(self, light):
        on = TurnOnLightCommand(light)
        assert on.execute() == "Light Living Room Light turned on"
        assert light.is_on
        assert on.undo() == "Light Living Room Light turned off"
        assert not light.is_on

        off = TurnOffLightCommand(light)
        light.turn_on()
        off.execute()
        assert not light.is_on
        off.undo()
        assert light.is_on

    def test_door_commands_are_inverses(self, door):
        unlock = UnlockDoorCommand(door)
        unlock.execute()
        assert door.is_locked is False
        unlock.undo()
        assert door.is_locked is True

        lock = LockDoorCommand(door)
        door.unlock()
        assert lock.execute() == "Door Front Door locked"
        assert lock.undo() == "Door Front Door unlocked"

    def test_execute_after_undo_replays(self, light):
        cmd = TurnOnLightCommand(light)
        cmd.execute()
        cmd.undo()
        cmd.execute()
        assert light.is_on

    def test_kinds(self, light, door):
        assert TurnOnLightCommand(light).kind is CommandKind.TURN_ON_LIGHT
        assert TurnOffLightCommand(light).kind is CommandKind.TURN_OFF_LIGHT
        assert LockDoorCommand(door).kind is CommandKind.LOCK_DOOR
        assert UnlockDoorCommand(door).kind is CommandKind.UNLOCK_DOOR

    def test_target_fixed_at_construction(self, registry, light):
        cmd = TurnOnLightCommand(light)
        registry.devices.clear()
        cmd.execute()
        assert light.is_on


class TestAuthorizationWrapper:
    def test_refuses_when_front_door_unlocked(self, registry, light, door):
        light.turn_on()
        door.unlock()

        guarded = AuthorizationWrapper(TurnOffLightCommand(light), registry)

        assert guarded.execute() == WARNING
        assert light.is_on is True
        assert guarded.refused is True

    def test_delegates_when_front_door_locked(self, registry, light, door):
        light.turn_on()
        guarded = AuthorizationWrapper(TurnOffLightCommand(light), registry)

        assert guarded.execute() == "Light Living Room Light turned off"
        assert light.is_on is False
        assert guarded.refused is False

    def test_delegates_when_front_door_absent(self, registry, light):
        light.turn_on()
        guarded = AuthorizationWrapper(TurnOffLightCommand(light), registry)
        guarded.execute()
        assert light.is_on is False

    def test_other_kinds_not_gated(self, registry, light, door):
        door.unlock()
        guarded = AuthorizationWrapper(TurnOnLightCommand(light), registry)
        guarded.execute()
        assert light.is_on is True

    def test_undo_always_delegates(self, registry, light, door):
        door.unlock()
        guarded = AuthorizationWrapper(TurnOffLightCommand(light), registry)
        guarded.execute()
        assert guarded.undo() == "Light Living Room Light turned on"
        assert light.is_on is True

    def test_refusal_clears_on_next_allowed_execute(self, registry, light, door):
        light.turn_on()
        door.unlock()
        guarded = AuthorizationWrapper(TurnOffLightCommand(light), registry)
        guarded.execute()
        door.lock()
        guarded.execute()
        assert guarded.refused is False
        assert light.is_on is False

    def test_kind_checked_through_nesting(self, registry, light, door, system_log):
        light.turn_on()
        door.unlock()
        inner = AuditWrapper(TurnOffLightCommand(light), system_log)
        guarded = AuthorizationWrapper(inner, registry)
        assert guarded.execute() == WARNING
        assert light.is_on is True
        assert system_log.messages() == []

    def test_custom_rule(self, registry, light):
        class NeverAtNight(SafetyRule):
            applies_to = frozenset({CommandKind.TURN_ON_LIGHT})
            warning = "Quiet hours"

            def violated(self, registry):
                return True

        guarded = AuthorizationWrapper(TurnOnLightCommand(light), registry, rule=NeverAtNight())
        assert guarded.execute() == "Quiet hours"
        assert light.is_on is False

    def test_rule_door_name_configurable(self, registry, light):
        from smarthome.models.devices import Lock
        side = registry.add_device(Lock("Side Door", locked=False))
        light.turn_on()
        rule = LightsOffWhileDoorUnlockedRule(door_name=side.name)
        guarded = AuthorizationWrapper(TurnOffLightCommand(light), registry, rule=rule)
        assert guarded.execute() == WARNING


class TestAuditWrapper:
    def test_records_before_and_after(self, light, system_log):
        audited = AuditWrapper(TurnOnLightCommand(light), system_log)

        result = audited.execute()

        assert result == "Light Living Room Light turned on"
        assert system_log.messages() == [
            "Executing command: TurnOnLightCommand",
            "Command result: Light Living Room Light turned on",
        ]

    def test_forwards_kind_refused_and_undo(self, registry, light, door, system_log):
        light.turn_on()
        door.unlock()
        audited = AuditWrapper(
            AuthorizationWrapper(TurnOffLightCommand(light), registry), system_log
        )
        assert audited.kind is CommandKind.TURN_OFF_LIGHT

        assert audited.execute() == WARNING
        assert audited.refused is True
        assert system_log.messages() == [
            "Executing command: AuthorizationWrapper",
            f"Command result: {WARNING}",
        ]

        light.turn_off()
        audited.undo()
        assert light.is_on is True

    def test_undo_not_audited(self):
        log = ActivityLog("system")
        light = Light("Porch")
        audited = AuditWrapper(TurnOnLightCommand(light), log)
        audited.undo()
        assert len(log) == 0
