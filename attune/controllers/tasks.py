"""To-do task CRUD controller."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from attune.controllers.dependencies import SessionDep
from attune.models.task import Task as TaskModel
from attune.views import TaskCreate, TaskListResponse, TaskRead, TaskResponse

router = APIRouter(prefix="/api/tasks", tags=["tasks"])

logger = logging.getLogger(__name__)

PAGE_SIZE = 20
PageQuery = Annotated[int, Query(ge=0)]
CompletedQuery = Annotated[Optional[bool], Query(alias="isCompleted")]


async def _get_task_or_404(session: SessionDep, task_slug: str) -> TaskModel:
    result = await session.execute(select(TaskModel).where(TaskModel.slug == task_slug))
    task = result.scalar_one_or_none()
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Object not found")
    return task


@router.get("", response_model=TaskListResponse)
async def list_tasks(
    session: SessionDep,
    page: PageQuery = 0,
    is_completed: CompletedQuery = None,
) -> TaskListResponse:
    query = select(TaskModel).order_by(TaskModel.id)
    if is_completed is not None:
        query = query.where(TaskModel.completed == is_completed)
    result = await session.execute(query.offset(page * PAGE_SIZE).limit(PAGE_SIZE))
    tasks = [TaskRead.model_validate(row) for row in result.scalars().all()]
    return TaskListResponse(tasks=tasks)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(payload: TaskCreate, session: SessionDep) -> TaskResponse:
    existing = await session.execute(select(TaskModel.id).where(TaskModel.slug == payload.slug))
    if existing.scalar_one_or_none() is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Task with slug '{payload.slug}' already exists",
        )

    due_date = payload.due_date
    if due_date.tzinfo is not None:
        due_date = due_date.replace(tzinfo=None) - due_date.utcoffset()

    task = TaskModel(
        name=payload.name,
        slug=payload.slug,
        description=payload.description,
        completed=payload.completed,
        due_date=due_date,
    )
    session.add(task)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Task with slug '{payload.slug}' already exists",
        ) from None
    await session.refresh(task)
    logger.info("Created task slug=%s", task.slug)
    return TaskResponse(task=TaskRead.model_validate(task))


@router.get("/{task_slug}", response_model=TaskResponse)
async def fetch_task(task_slug: str, session: SessionDep) -> TaskResponse:
    task = await _get_task_or_404(session, task_slug)
    return TaskResponse(task=TaskRead.model_validate(task))


@router.delete("/{task_slug}", response_model=TaskResponse)
async def delete_task(task_slug: str, session: SessionDep) -> TaskResponse:
    task = await _get_task_or_404(session, task_slug)
    deleted = TaskRead.model_validate(task)
    await session.delete(task)
    await session.commit()
    logger.info("Deleted task slug=%s", task_slug)
    return TaskResponse(task=deleted)
