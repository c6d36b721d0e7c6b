"""CLI for replaying elevator requests defined in JSON scenario files."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from control import ElevatorController, build_controller
from lift import BuildingConfig, ElevatorError, InvalidArgumentError, default_config

logger = logging.getLogger("run_scenario")


def build_scenario_controller(config: Dict) -> ElevatorController:
    building_cfg = config.get("building")
    if building_cfg is None:
        return build_controller(default_config())
    return build_controller(BuildingConfig.from_dict(building_cfg))


def _elevator_id(event: Dict) -> int:
    elevator_id = event.get("elevator_id")
    if elevator_id is None:
        raise InvalidArgumentError(f"'{event.get('type')}' event is missing 'elevator_id'.")
    return elevator_id


def _apply_event(controller: ElevatorController, event: Dict) -> Dict:
    event_type = event.get("type", "request")
    if event_type == "request":
        elevator = controller.request_elevator(
            event.get("floor", 1), event.get("count", 0), event.get("direction", "Up")
        )
        return {"elevator_id": elevator.elevator_id, "status": elevator.get_status().to_dict()}
    if event_type == "unload":
        status = controller.release_load(_elevator_id(event), event.get("amount", 0))
        return {"elevator_id": status.elevator_id, "status": status.to_dict()}
    if event_type == "status":
        status = controller.get_elevator_status(_elevator_id(event))
        return {"elevator_id": status.elevator_id, "status": status.to_dict()}
    raise InvalidArgumentError(f"Unknown event type '{event_type}'. Available: request, unload, status")


def run_events(controller: ElevatorController, events: Iterable[Dict]) -> List[Dict]:
    results: List[Dict] = []
    for index, event in enumerate(events):
        record: Dict = {"event": index, "type": event.get("type", "request")}
        try:
            record.update(_apply_event(controller, event))
            record["ok"] = True
        except ElevatorError as exc:
            logger.warning("Event %d failed: %s", index, exc.message)
            record.update({"ok": False, "error": exc.kind.value, "message": exc.message})
        results.append(record)
    return results


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write event results as JSON",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    config = json.loads(args.config.read_text())
    controller = build_scenario_controller(config)
    results = run_events(controller, config.get("events", []))

    summary = {
        "scenario": config.get("name", args.config.stem),
        "description": config.get("description"),
        "events": results,
        "final_state": controller.building.snapshot(),
    }

    save_results(args.output, summary)

    failed = sum(1 for r in results if not r["ok"])
    print(f"Scenario: {summary['scenario']}")
    if summary["description"]:
        print(summary["description"])
    print(f"Events: {len(results)} ({failed} failed)")
    for record in results:
        if record["ok"]:
            status = record["status"]
            print(
                f"  #{record['event']} {record['type']}: elevator {record['elevator_id']} "
                f"at floor {status['current_floor']} ({status['direction']}), load {status['load']}/{status['capacity']}"
            )
        else:
            print(f"  #{record['event']} {record['type']}: {record['error']} - {record['message']}")
    print("Final state:")
    for elevator in summary["final_state"]["elevators"]:
        print(f"  elevator {elevator['id']} [{elevator['type']}]: floor {elevator['current_floor']}, load {elevator['load']}")
    if args.output:
        print(f"Saved results to {args.output}")


if __name__ == "__main__":
    main()
