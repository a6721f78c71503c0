import asyncio
import logging
import signal
import sys

from semirobot.bus import EventBus
from semirobot.config import config
from semirobot.hw.sim import SimDriveBase
from semirobot.messages import RobotMode, RobotState
from semirobot.nodes.control_loop import ControlLoopNode, log_state
from semirobot.robot import Robot

logger = logging.getLogger("semirobot.main")


async def run_match() -> RobotState:
    """Simulated match: disabled, autonomous period, disabled again."""
    sim = SimDriveBase(
        max_wheel_speed=config.simulation.max_wheel_speed,
        track_width=config.simulation.track_width,
        field_signal=config.simulation.field_signal,
    )
    robot = Robot(sim.hardware(), config)
    robot.robot_init()

    bus = EventBus()
    node = ControlLoopNode(robot, bus, sim=sim)
    await bus.subscribe("robot/state", log_state)
    await node.start()

    await bus.publish_mode(RobotMode.DISABLED)
    await asyncio.sleep(0.2)
    await bus.publish_mode(RobotMode.AUTONOMOUS)
    await asyncio.sleep(config.simulation.autonomous_s)
    await bus.publish_mode(RobotMode.DISABLED)
    await node.stop()

    state = robot.snapshot()
    logger.info(
        "Autonomous finished after %d ticks: heading=%.1f deg, left=%.2f m, right=%.2f m",
        node.ticks,
        state.heading,
        state.left_distance,
        state.right_distance,
    )
    return state


def signal_handler(sig, frame):
    print("\n[SHUTDOWN] Stopping control loop...")
    sys.exit(0)


def main() -> None:
    # Configure logging for the entire application
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s:     %(name)s - %(message)s",
    )

    # Set log level for our modules
    logging.getLogger("semirobot").setLevel(logging.INFO)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    asyncio.run(run_match())


if __name__ == "__main__":
    main()
