#!/usr/bin/env python3
"""
Walk a TodoStore through the demonstration sequence and print each step.

Usage:
    python verify_todos.py
    python verify_todos.py --config config.yaml --event-url http://localhost:8080/events
"""
import argparse
import logging
import sys

from todolist.config import TodoConfig
from todolist.emitter import TodoEventEmitter
from todolist.events import TodoEventBridge, TodoEventType
from todolist.store import TodoStore


def _print_not_found(action, todo_id=None, task=None):
    if todo_id is not None:
        print(f"Todo with ID {todo_id} not found")
    else:
        print(f"Todo '{task}' not found")


def attach_status_lines(bridge: TodoEventBridge) -> None:
    """Print one status line per bridge event."""
    bridge.subscribe(TodoEventType.ADDED, lambda todo: print(f"Added: {todo.task}"))
    bridge.subscribe(TodoEventType.REMOVED, lambda todo: print(f"Removed: {todo.task}"))
    bridge.subscribe(
        TodoEventType.TOGGLED,
        lambda todo: print(f"Toggled: {todo.task} - {todo.status}"),
    )
    bridge.subscribe(TodoEventType.NOT_FOUND, _print_not_found)
    bridge.subscribe(
        TodoEventType.CLEARED,
        lambda count: print(f"Cleared {count} completed todos"),
    )


def display(store: TodoStore) -> None:
    todos = store.list_all()
    if not todos:
        print("No todos yet!")
        return
    print("\nYour Todo List:")
    for todo in todos:
        mark = "x" if todo.is_completed else " "
        print(f"[{mark}] [{todo.id}] {todo.task}")


def run_demo(cfg: TodoConfig) -> TodoStore:
    store = TodoStore()
    bridge = TodoEventBridge(store)
    attach_status_lines(bridge)
    if cfg.emit_events or cfg.event_url:
        bridge.subscribe_all(TodoEventEmitter(cfg.event_url, cfg.jsonl_path))

    for task in cfg.demo_tasks:
        bridge.add(task)
    display(store)

    bridge.toggle(1)
    bridge.toggle(3)
    display(store)

    print("\nStatistics:")
    print(f"Total todos: {len(store)}")
    print(f"Completed: {store.count_completed()}")
    print(f"Pending: {store.count_pending()}")

    bridge.remove_by_id(2)
    display(store)

    bridge.clear_completed()
    display(store)

    print("\nList operations:")
    snapshot = store.list_all()
    print(f"All todos (snapshot): {snapshot}")
    print(f"Pending todos: {[t for t in snapshot if not t.is_completed]}")
    print(f"Task names: {[t.task for t in snapshot]}")
    return store


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Todo list demonstration")
    ap.add_argument("--config", default=None, help="Path to config.yaml")
    ap.add_argument(
        "--event-url", default=None,
        help="Endpoint to POST events to (e.g. http://localhost:8080/events)",
    )
    ap.add_argument("--jsonl", default=None, help="Fallback JSONL path for events")
    ap.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    args = ap.parse_args(argv)

    cfg = TodoConfig.load(args.config)

    # CLI overrides
    if args.event_url:
        cfg.event_url = args.event_url
    if args.jsonl:
        cfg.jsonl_path = args.jsonl
        cfg.emit_events = True
    if args.log_level:
        cfg.log_level = args.log_level.upper()

    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.WARNING),
        format="%(asctime)s [todolist] %(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    run_demo(cfg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
