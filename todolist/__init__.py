# Todo list: in-memory task tracking with event-driven status reporting
#
# Components:
#   schema.py  - Data model (Todo)
#   store.py   - Ordered in-memory store (TodoStore)
#   events.py  - Event bridge reporting the outcome of each store operation
#   sync.py    - Lock wrapper for stores shared between threads
#   emitter.py - Forwards events to an HTTP endpoint or a local JSONL file
#   config.py  - YAML configuration
