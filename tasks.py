from flask import Blueprint, current_app, jsonify

from auth import auth_required
from errors import NotFoundError, ValidationError, json_body
from models import Task, utcnow
from store import stores

tasks_bp = Blueprint('tasks', __name__, url_prefix='/api/tasks')


def _find_task(task_id):
    task = stores().tasks.get(task_id)
    if task is None:
        raise NotFoundError('Task not found')
    return task


@tasks_bp.route('', methods=['POST'])
@auth_required
def create_task():
    data = json_body()
    title = data.get('title')
    if not title:
        raise ValidationError('Task title required')

    task = Task(
        title=title,
        priority=data.get('priority') or 'medium',
        due_date=data.get('dueDate') or None,
        completed=False,
    )
    stores().tasks.put(task)
    current_app.logger.info("Task added: %s (id=%s, %s priority)", task.title, task.id, task.priority)

    return jsonify(success=True, task=task.to_dict()), 201


@tasks_bp.route('', methods=['GET'])
@auth_required
def list_tasks():
    tasks = [task.to_dict() for task in stores().tasks.list()]
    return jsonify(success=True, tasks=tasks, total=len(tasks))


@tasks_bp.route('/<int:task_id>', methods=['PUT'])
@auth_required
def update_task(task_id):
    task = _find_task(task_id)
    data = json_body()

    if 'completed' in data and not isinstance(data['completed'], bool):
        raise ValidationError('completed must be true or false')

    # Empty strings and nulls leave text fields untouched; completed=false must still apply
    if data.get('title'):
        task.title = data['title']
    if data.get('priority'):
        task.priority = data['priority']
    if data.get('dueDate'):
        task.due_date = data['dueDate']
    if 'completed' in data:
        task.completed = data['completed']

    task.updated_at = utcnow()
    stores().tasks.put(task)
    current_app.logger.info("Task updated: id=%s", task.id)

    return jsonify(success=True, task=task.to_dict())


@tasks_bp.route('/<int:task_id>', methods=['DELETE'])
@auth_required
def delete_task(task_id):
    if not stores().tasks.delete(task_id):
        raise NotFoundError('Task not found')

    current_app.logger.info("Task deleted: id=%s", task_id)
    return jsonify(success=True, message='Task deleted')
