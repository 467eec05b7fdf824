"""Kinematic command solver for fixed-distance moves.

Every wheel is driven at the same linear speed so the rover travels straight.
That speed is the slowest wheel's top speed at the battery's ceiling voltage
(the *bottleneck* motor); every other motor is throttled down to match it.

Top speed of wheel *i* at voltage ``V``::

    wheel_speed = (kv * V / gear_ratio) * (pi * diameter / 60)

The solver inverts the same relation to find each motor's command voltage.
Only the first battery is used; multi-battery configs are flagged, not combined.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from rovercli.domain.command import MotionCommand, MotorCommand
from rovercli.domain.errors import ComputationError, InputValidationError
from rovercli.domain.exercise import ExerciseSpec
from rovercli.domain.hardware import HardwareModel, Motor

SECONDS_PER_MINUTE = 60.0


@dataclass(frozen=True)
class DrivePlan:
    """A solved fixed-distance move plus the quantities it was derived from."""

    fixed_distance: float
    battery_max_voltage: float
    wheel_speeds: list[tuple[str, float]]
    final_max_wheel_speed: float
    bottleneck: str
    bottleneck_index: int
    command: MotionCommand
    warnings: list[str] = field(default_factory=list)


def _require_positive(value: float, *, code: str, field_name: str) -> float:
    if not math.isfinite(value) or value <= 0:
        raise InputValidationError(
            code,
            f"{field_name} must be positive, got {value}",
            field=field_name,
        )
    return value


def wheel_top_speed(motor: Motor, battery_max_voltage: float) -> float:
    """Linear surface speed of *motor*'s wheel at *battery_max_voltage*."""
    max_motor_rpm = motor.kv_rating * battery_max_voltage
    circumference = math.pi * motor.wheel.diameter
    return (max_motor_rpm / motor.wheel.gear_ratio) * (circumference / SECONDS_PER_MINUTE)


def voltage_for_wheel_speed(motor: Motor, wheel_speed: float) -> float:
    """Voltage that spins *motor*'s wheel at exactly *wheel_speed*."""
    motor_rpm = (wheel_speed * motor.wheel.gear_ratio * SECONDS_PER_MINUTE) / (
        math.pi * motor.wheel.diameter
    )
    return motor_rpm / motor.kv_rating


def fixed_distance_of(exercise: ExerciseSpec) -> float:
    """Extract and validate ``fixed_distance.value`` from *exercise*."""
    if exercise.fixed_distance is None:
        raise InputValidationError(
            "MISSING_FIXED_DISTANCE",
            "fixed_distance not found in exercise data",
            field="fixed_distance",
        )
    if exercise.fixed_distance.value is None:
        raise InputValidationError(
            "MISSING_FIXED_DISTANCE_VALUE",
            "fixed_distance.value not found in exercise data",
            field="fixed_distance.value",
        )
    return _require_positive(
        exercise.fixed_distance.value,
        code="INVALID_FIXED_DISTANCE",
        field_name="fixed_distance.value",
    )


def validate_hardware(hardware: HardwareModel) -> float:
    """Check every quantity the solver divides by; return the voltage ceiling."""
    if not hardware.batteries:
        raise InputValidationError(
            "NO_BATTERIES", "No batteries found in rover data", field="batteries"
        )
    battery_max_voltage = _require_positive(
        hardware.batteries[0].max_voltage,
        code="INVALID_BATTERY_VOLTAGE",
        field_name="batteries[0].max_voltage",
    )
    if not hardware.motors:
        raise InputValidationError("NO_MOTORS", "No motors found in rover data", field="motors")

    for i, motor in enumerate(hardware.motors):
        _require_positive(
            motor.kv_rating, code="INVALID_KV_RATING", field_name=f"motors[{i}].kv_rating"
        )
        _require_positive(
            motor.wheel.gear_ratio,
            code="INVALID_GEAR_RATIO",
            field_name=f"motors[{i}].wheel.gear_ratio",
        )
        _require_positive(
            motor.wheel.diameter,
            code="INVALID_WHEEL_DIAMETER",
            field_name=f"motors[{i}].wheel.diameter",
        )
    return battery_max_voltage


def plan_fixed_distance(hardware: HardwareModel, exercise: ExerciseSpec) -> DrivePlan:
    """Solve a fixed-distance move and keep the intermediate quantities.

    Raises:
        InputValidationError: A required input is missing or non-positive.
        ComputationError: The derived speed, duration, or a voltage is degenerate.
    """
    distance = fixed_distance_of(exercise)
    battery_max_voltage = validate_hardware(hardware)

    warnings: list[str] = []
    if len(hardware.batteries) > 1:
        warnings.append(
            f"{len(hardware.batteries)} batteries configured; "
            "only the first battery's max_voltage is used"
        )

    speeds = [wheel_top_speed(m, battery_max_voltage) for m in hardware.motors]
    final_max_wheel_speed = min(speeds)
    bottleneck_index = speeds.index(final_max_wheel_speed)

    if not math.isfinite(final_max_wheel_speed):
        raise ComputationError(
            "NON_FINITE_RESULT",
            f"Final max wheel speed is not finite: {final_max_wheel_speed}",
            field="final_max_wheel_speed",
        )
    if final_max_wheel_speed <= 0:
        raise ComputationError(
            "NON_POSITIVE_SPEED",
            f"Final max wheel speed must be positive, got {final_max_wheel_speed}",
            field="final_max_wheel_speed",
        )

    duration = distance / final_max_wheel_speed
    if not math.isfinite(duration):
        raise ComputationError(
            "NON_FINITE_RESULT", f"Computed duration is not finite: {duration}", field="duration"
        )

    motor_commands: list[MotorCommand] = []
    for i, motor in enumerate(hardware.motors):
        voltage = voltage_for_wheel_speed(motor, final_max_wheel_speed)
        if not math.isfinite(voltage):
            raise ComputationError(
                "NON_FINITE_RESULT",
                f"Computed voltage for motor {motor.name!r} is not finite: {voltage}",
                field=f"motors[{i}].voltage",
            )
        motor_commands.append(MotorCommand(name=motor.name, voltage=voltage))

    return DrivePlan(
        fixed_distance=distance,
        battery_max_voltage=battery_max_voltage,
        wheel_speeds=[(m.name, s) for m, s in zip(hardware.motors, speeds, strict=True)],
        final_max_wheel_speed=final_max_wheel_speed,
        bottleneck=hardware.motors[bottleneck_index].name,
        bottleneck_index=bottleneck_index,
        command=MotionCommand(duration=duration, motor_commands=motor_commands),
        warnings=warnings,
    )


def solve_fixed_distance(hardware: HardwareModel, exercise: ExerciseSpec) -> MotionCommand:
    """Return the MotionCommand that drives *exercise*'s fixed distance."""
    return plan_fixed_distance(hardware, exercise).command
