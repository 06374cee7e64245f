# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Team management API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.deps import get_store, require_permission
from src.schemas.rbac import Team, TeamCreate, TeamUpdate, TeamWithMembers, User
from src.services import rbac_service
from src.store import AuthorizationStore

router = APIRouter()


def build_team_response(store: AuthorizationStore, team: Team) -> TeamWithMembers:
    return TeamWithMembers(
        **team.model_dump(), members=rbac_service.team_members(store, team)
    )


def _get_team_or_404(store: AuthorizationStore, team_id: str) -> Team:
    team = store.get_team(team_id)
    if team is None:
        raise HTTPException(status_code=404, detail="Team not found")
    return team


@router.get("/teams", response_model=list[TeamWithMembers], summary="List teams")
def list_teams(
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("view_teams")),
) -> list[TeamWithMembers]:
    """Requires view_teams permission."""
    return [build_team_response(store, team) for team in store.teams]


@router.post(
    "/teams",
    response_model=TeamWithMembers,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new team",
)
def create_team(
    team_in: TeamCreate,
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("create_teams")),
) -> TeamWithMembers:
    """Requires create_teams permission."""
    return build_team_response(store, store.add_team(team_in))


@router.get("/teams/{team_id}", response_model=TeamWithMembers, summary="Get a team")
def get_team(
    team_id: str,
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("view_teams")),
) -> TeamWithMembers:
    return build_team_response(store, _get_team_or_404(store, team_id))


@router.put("/teams/{team_id}", response_model=TeamWithMembers, summary="Update a team")
def update_team(
    team_id: str,
    team_in: TeamUpdate,
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("edit_teams")),
) -> TeamWithMembers:
    """Requires edit_teams permission."""
    _get_team_or_404(store, team_id)
    store.update_team(team_id, team_in)
    return build_team_response(store, store.get_team(team_id))


@router.delete(
    "/teams/{team_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a team",
)
def delete_team(
    team_id: str,
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("delete_teams")),
) -> None:
    """Requires delete_teams permission."""
    _get_team_or_404(store, team_id)
    store.delete_team(team_id)
