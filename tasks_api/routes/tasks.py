from flask import Blueprint, current_app, request, jsonify
from ..models.task import Task
from ..services.task_store import TaskStore
import logging

tasks_bp = Blueprint("tasks", __name__)


def get_store():
    return TaskStore(current_app.config["DATA_PATH"])


@tasks_bp.route("/tasks", methods=["GET"])
def get_tasks():
    try:
        tasks = get_store().load()
    except Exception as e:
        logging.error(f"Error reading tasks: {e}", exc_info=True)
        return jsonify({"error": "Failed to read tasks"}), 500
    return jsonify(tasks)


@tasks_bp.route("/tasks", methods=["POST"])
def create_task():
    try:
        # Non-JSON bodies are accepted and treated as empty
        data = request.get_json(silent=True) or {}
        task = Task.create(data.get("title"))
        get_store().append(task)
    except Exception as e:
        logging.error(f"Error creating task: {e}", exc_info=True)
        return jsonify({"error": "Failed to create task"}), 500
    return jsonify(task.to_dict()), 201
