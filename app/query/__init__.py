"""쿼리 패키지 — 동적 검색 조건을 SQLAlchemy 술어로 조립.

Query package — Builds SQLAlchemy boolean predicates from optional
search criteria. Repositories attach the composed predicate to their
statements; this package never executes anything.
"""
