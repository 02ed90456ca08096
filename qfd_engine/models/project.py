"""
Project snapshot — the single object every engine computation reads.

Design rules:
  1. A QFDProject is immutable; every edit returns a new snapshot.
  2. Only raw House of Quality records live here.  Priorities, weights and
     classifications are recomputed by the engine and never stored.
  3. Lookups (relationship strength, correlation partners) go through
     keyed indexes rather than list scans.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any

from pydantic import BaseModel, Field, model_validator

from qfd_engine.config import get_settings
from .enums import RelationshipStrength, CorrelationType
from .schemas import (
    CustomerRequirement,
    TechnicalRequirement,
    Relationship,
    TechnicalCorrelation,
)


def _default_competitor_names() -> tuple[str, ...]:
    return tuple(get_settings().default_competitor_names)


def _pair_key(first: str, second: str) -> tuple[str, str]:
    return (first, second) if first <= second else (second, first)


class QFDProject(BaseModel):
    """A House of Quality snapshot: requirements, matrix and roof.

    Collections are stored as tuples so a snapshot cannot be mutated in
    place; lists are accepted on input and JSON still carries arrays.
    """

    customer_requirements: tuple[CustomerRequirement, ...] = Field(default_factory=tuple)
    technical_requirements: tuple[TechnicalRequirement, ...] = Field(default_factory=tuple)
    relationships: tuple[Relationship, ...] = Field(default_factory=tuple)
    technical_correlations: tuple[TechnicalCorrelation, ...] = Field(default_factory=tuple)
    competitor_names: tuple[str, ...] = Field(default_factory=_default_competitor_names)

    model_config = {"frozen": True}

    # ── Validation ───────────────────────────────────────

    @model_validator(mode="after")
    def _check_invariants(self) -> "QFDProject":
        competitors = len(self.competitor_names)
        for req in self.customer_requirements:
            if len(req.competitor_ratings) != competitors:
                raise ValueError(
                    f"Customer requirement '{req.id}' has {len(req.competitor_ratings)} "
                    f"competitor ratings, expected {competitors}"
                )

        _require_unique("customer requirement id", [r.id for r in self.customer_requirements])
        _require_unique("technical requirement id", [r.id for r in self.technical_requirements])
        _require_unique("relationship", [r.key for r in self.relationships])
        _require_unique("technical correlation", [c.pair_key for c in self.technical_correlations])
        return self

    # ── Indexes ──────────────────────────────────────────

    def relationship_index(self) -> dict[tuple[str, str], RelationshipStrength]:
        """(customer_id, technical_id) → strength, for every stored relationship."""
        return {rel.key: rel.strength for rel in self.relationships}

    def correlation_index(self) -> dict[tuple[str, str], TechnicalCorrelation]:
        """Canonical pair key → correlation record."""
        return {corr.pair_key: corr for corr in self.technical_correlations}

    def correlations_by_requirement(self) -> dict[str, list[TechnicalCorrelation]]:
        """Technical requirement id → every correlation record that names it."""
        index: dict[str, list[TechnicalCorrelation]] = defaultdict(list)
        for corr in self.technical_correlations:
            index[corr.tech_req1_id].append(corr)
            index[corr.tech_req2_id].append(corr)
        return dict(index)

    def strength(self, customer_req_id: str, technical_req_id: str) -> RelationshipStrength:
        return self.relationship_index().get(
            (customer_req_id, technical_req_id), RelationshipStrength.NONE
        )

    def correlation(self, tech_req1_id: str, tech_req2_id: str) -> CorrelationType:
        """Correlation between two technical requirements, in either order."""
        corr = self.correlation_index().get(_pair_key(tech_req1_id, tech_req2_id))
        return corr.correlation if corr else CorrelationType.NONE

    def customer_requirement(self, req_id: str) -> CustomerRequirement:
        for req in self.customer_requirements:
            if req.id == req_id:
                return req
        raise KeyError(f"Unknown customer requirement: {req_id}")

    def technical_requirement(self, req_id: str) -> TechnicalRequirement:
        for req in self.technical_requirements:
            if req.id == req_id:
                return req
        raise KeyError(f"Unknown technical requirement: {req_id}")

    # ── Edits (each returns a new snapshot) ──────────────

    def _replace(self, **changes: Any) -> "QFDProject":
        fields = {name: getattr(self, name) for name in type(self).model_fields}
        fields.update(changes)
        return type(self)(**fields)

    def add_customer_requirement(
        self, requirement: CustomerRequirement | None = None
    ) -> "QFDProject":
        """Append a customer requirement; a blank one rated at the default is used when omitted."""
        if requirement is None:
            default = get_settings().default_rating
            requirement = CustomerRequirement(
                importance=default,
                competitor_ratings=[default] * len(self.competitor_names),
            )
        return self._replace(
            customer_requirements=[*self.customer_requirements, requirement]
        )

    def update_customer_requirement(self, req_id: str, **changes: Any) -> "QFDProject":
        current = self.customer_requirement(req_id)
        updated = CustomerRequirement(**{**current.model_dump(), **changes, "id": req_id})
        return self._replace(
            customer_requirements=[
                updated if req.id == req_id else req for req in self.customer_requirements
            ]
        )

    def remove_customer_requirement(self, req_id: str) -> "QFDProject":
        """Drop a customer requirement and the relationships that reference it."""
        self.customer_requirement(req_id)
        return self._replace(
            customer_requirements=[r for r in self.customer_requirements if r.id != req_id],
            relationships=[r for r in self.relationships if r.customer_req_id != req_id],
        )

    def add_technical_requirement(
        self, requirement: TechnicalRequirement | None = None
    ) -> "QFDProject":
        if requirement is None:
            requirement = TechnicalRequirement(difficulty=get_settings().default_rating)
        return self._replace(
            technical_requirements=[*self.technical_requirements, requirement]
        )

    def update_technical_requirement(self, req_id: str, **changes: Any) -> "QFDProject":
        current = self.technical_requirement(req_id)
        updated = TechnicalRequirement(**{**current.model_dump(), **changes, "id": req_id})
        return self._replace(
            technical_requirements=[
                updated if req.id == req_id else req for req in self.technical_requirements
            ]
        )

    def remove_technical_requirement(self, req_id: str) -> "QFDProject":
        """Drop a technical requirement with its relationships and correlations."""
        self.technical_requirement(req_id)
        return self._replace(
            technical_requirements=[r for r in self.technical_requirements if r.id != req_id],
            relationships=[r for r in self.relationships if r.technical_req_id != req_id],
            technical_correlations=[
                c for c in self.technical_correlations if not c.involves(req_id)
            ],
        )

    def set_relationship(
        self,
        customer_req_id: str,
        technical_req_id: str,
        strength: RelationshipStrength | int,
    ) -> "QFDProject":
        """Upsert a matrix cell.  Strength NONE deletes the record."""
        self.customer_requirement(customer_req_id)
        self.technical_requirement(technical_req_id)
        strength = RelationshipStrength(strength)
        key = (customer_req_id, technical_req_id)

        if strength == RelationshipStrength.NONE:
            return self._replace(
                relationships=[r for r in self.relationships if r.key != key]
            )

        new_rel = Relationship(
            customer_req_id=customer_req_id,
            technical_req_id=technical_req_id,
            strength=strength,
        )
        if key in self.relationship_index():
            relationships = [new_rel if r.key == key else r for r in self.relationships]
        else:
            relationships = [*self.relationships, new_rel]
        return self._replace(relationships=relationships)

    def set_correlation(
        self,
        tech_req1_id: str,
        tech_req2_id: str,
        correlation: CorrelationType | int,
    ) -> "QFDProject":
        """Upsert a roof cell in canonical order.  Correlation NONE deletes the record."""
        if tech_req1_id == tech_req2_id:
            raise ValueError(
                f"Technical requirement '{tech_req1_id}' cannot correlate with itself"
            )
        self.technical_requirement(tech_req1_id)
        self.technical_requirement(tech_req2_id)
        correlation = CorrelationType(correlation)
        key = _pair_key(tech_req1_id, tech_req2_id)

        if correlation == CorrelationType.NONE:
            return self._replace(
                technical_correlations=[
                    c for c in self.technical_correlations if c.pair_key != key
                ]
            )

        new_corr = TechnicalCorrelation(
            tech_req1_id=tech_req1_id,
            tech_req2_id=tech_req2_id,
            correlation=correlation,
        )
        if key in self.correlation_index():
            correlations = [
                new_corr if c.pair_key == key else c for c in self.technical_correlations
            ]
        else:
            correlations = [*self.technical_correlations, new_corr]
        return self._replace(technical_correlations=correlations)

    def update_competitor_names(self, names: list[str]) -> "QFDProject":
        """Rename/resize the competitor list, realigning every rating row by position.

        Rows are padded with the configured default rating when the list
        grows and truncated from the end when it shrinks.  Use
        ``remove_competitor`` to drop a column other than the last.
        """
        default = get_settings().default_rating
        realigned = [
            _with_ratings(
                req,
                [
                    req.competitor_ratings[i] if i < len(req.competitor_ratings) else default
                    for i in range(len(names))
                ],
            )
            for req in self.customer_requirements
        ]
        return self._replace(
            competitor_names=tuple(names),
            customer_requirements=realigned,
        )

    def remove_competitor(self, index: int) -> "QFDProject":
        """Drop one competitor column: its name and that rating from every row."""
        if not 0 <= index < len(self.competitor_names):
            raise IndexError(
                f"Competitor index {index} out of range for {len(self.competitor_names)} competitors"
            )
        names = [n for i, n in enumerate(self.competitor_names) if i != index]
        trimmed = [
            _with_ratings(
                req, [r for i, r in enumerate(req.competitor_ratings) if i != index]
            )
            for req in self.customer_requirements
        ]
        return self._replace(competitor_names=names, customer_requirements=trimmed)


def _with_ratings(req: CustomerRequirement, ratings: list[int]) -> CustomerRequirement:
    # Rebuilt through the constructor so the ratings are range-checked.
    return CustomerRequirement(**{**req.model_dump(), "competitor_ratings": ratings})


def _require_unique(label: str, keys: list[Any]) -> None:
    seen: set[Any] = set()
    for key in keys:
        if key in seen:
            raise ValueError(f"Duplicate {label}: {key}")
        seen.add(key)


def sample_project() -> QFDProject:
    """Small demo House of Quality for a responsive software product."""
    return QFDProject(
        customer_requirements=[
            CustomerRequirement(
                id="cust1", description="Easy to use interface",
                importance=5, competitor_ratings=[3, 4],
            ),
            CustomerRequirement(
                id="cust2", description="Fast response time",
                importance=4, competitor_ratings=[4, 3],
            ),
            CustomerRequirement(
                id="cust3", description="Reliable operation",
                importance=5, competitor_ratings=[3, 5],
            ),
        ],
        technical_requirements=[
            TechnicalRequirement(
                id="tech1", description="Response time",
                unit="ms", target="<200", difficulty=3,
            ),
            TechnicalRequirement(
                id="tech2", description="UI complexity score",
                unit="points", target="<50", difficulty=2,
            ),
            TechnicalRequirement(
                id="tech3", description="System uptime",
                unit="%", target=">99.9", difficulty=4,
            ),
        ],
        relationships=[
            Relationship(customer_req_id="cust1", technical_req_id="tech2",
                         strength=RelationshipStrength.STRONG),
            Relationship(customer_req_id="cust2", technical_req_id="tech1",
                         strength=RelationshipStrength.STRONG),
            Relationship(customer_req_id="cust3", technical_req_id="tech3",
                         strength=RelationshipStrength.STRONG),
            Relationship(customer_req_id="cust1", technical_req_id="tech1",
                         strength=RelationshipStrength.MEDIUM),
        ],
        technical_correlations=[
            TechnicalCorrelation(tech_req1_id="tech1", tech_req2_id="tech2",
                                 correlation=CorrelationType.NEGATIVE),
            TechnicalCorrelation(tech_req1_id="tech1", tech_req2_id="tech3",
                                 correlation=CorrelationType.POSITIVE),
            TechnicalCorrelation(tech_req1_id="tech2", tech_req2_id="tech3",
                                 correlation=CorrelationType.STRONG_POSITIVE),
        ],
        competitor_names=["Product A", "Product B"],
    )
