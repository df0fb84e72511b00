"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates every endpoint into a single router for
inclusion in the FastAPI application under ``/api``.

Included routers:
    - spaces: 스페이스 관리 (Spaces and last-modified)
    - boards: 보드 관리 (Boards nested under spaces)
    - products: 제품 관리 (Products)
    - people: 사람 관리 (People)
    - roles: 스페이스 역할 (Roles of a space)
    - locations: 스페이스 위치 (Locations of a space)
    - assignments: 배정 조회/변경 (Assignment reads and mutations)
    - reassignments: 날짜별 이동 내역 (Reassignments on a date)
"""

from fastapi import APIRouter

from peoplemover.api.routes.spaces import router as spaces_router
from peoplemover.api.routes.boards import router as boards_router
from peoplemover.api.routes.products import router as products_router
from peoplemover.api.routes.people import router as people_router
from peoplemover.api.routes.roles import router as roles_router
from peoplemover.api.routes.locations import router as locations_router
from peoplemover.api.routes.assignments import router as assignments_router
from peoplemover.api.routes.reassignments import router as reassignments_router

api_router: APIRouter = APIRouter()

api_router.include_router(spaces_router, prefix="/spaces", tags=["Spaces"])
# 보드/제품/사람/역할/위치: /spaces/{space_id}/... 하위 경로 포함 (nested under spaces)
api_router.include_router(boards_router, tags=["Boards"])
api_router.include_router(products_router, tags=["Products"])
api_router.include_router(people_router, tags=["People"])
api_router.include_router(roles_router, tags=["Roles"])
api_router.include_router(locations_router, tags=["Locations"])
api_router.include_router(assignments_router, prefix="/assignments", tags=["Assignments"])
api_router.include_router(reassignments_router, prefix="/reassignment", tags=["Reassignments"])
