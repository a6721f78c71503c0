from semirobot.hw.base import MotorController


class Ramp:
    """Рампа для выгрузки куба."""

    def __init__(self, motor: MotorController, deploy_output: float = 1.0) -> None:
        self.motor = motor
        self.deploy_output = deploy_output
        self.deployed = False

    def deploy(self) -> None:
        self.motor.set(self.deploy_output)
        self.deployed = True

    def retract(self) -> None:
        self.motor.set(-self.deploy_output)
        self.deployed = False

    def stop(self) -> None:
        self.motor.set(0.0)
