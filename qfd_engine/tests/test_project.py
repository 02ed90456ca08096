"""
Tests: Project snapshot validation, indexes and immutable edits.

Run with:
    pytest qfd_engine/tests/test_project.py -v
"""

import pytest
from pydantic import ValidationError

from qfd_engine.models import (
    QFDProject,
    CustomerRequirement,
    TechnicalRequirement,
    Relationship,
    TechnicalCorrelation,
    RelationshipStrength,
    CorrelationType,
    sample_project,
)


class TestRecordValidation:
    @pytest.mark.parametrize("importance", [0, 6])
    def test_importance_out_of_range(self, importance):
        with pytest.raises(ValidationError):
            CustomerRequirement(importance=importance)

    @pytest.mark.parametrize("difficulty", [0, 6])
    def test_difficulty_out_of_range(self, difficulty):
        with pytest.raises(ValidationError):
            TechnicalRequirement(difficulty=difficulty)

    def test_competitor_rating_out_of_range(self):
        with pytest.raises(ValidationError):
            CustomerRequirement(competitor_ratings=[3, 7])

    def test_strength_must_be_enum_value(self):
        with pytest.raises(ValidationError):
            Relationship(customer_req_id="c", technical_req_id="t", strength=5)

    def test_correlation_must_be_enum_value(self):
        with pytest.raises(ValidationError):
            TechnicalCorrelation(tech_req1_id="a", tech_req2_id="b", correlation=3)

    def test_self_correlation_rejected(self):
        with pytest.raises(ValidationError, match="cannot correlate with itself"):
            TechnicalCorrelation(tech_req1_id="a", tech_req2_id="a", correlation=1)

    def test_correlation_pair_is_canonical(self):
        corr = TechnicalCorrelation(tech_req1_id="b", tech_req2_id="a", correlation=-1)
        assert corr.pair_key == ("a", "b")
        assert corr == TechnicalCorrelation(tech_req1_id="a", tech_req2_id="b", correlation=-1)

    def test_records_are_frozen(self):
        req = TechnicalRequirement(difficulty=2)
        with pytest.raises(ValidationError):
            req.difficulty = 5

    def test_generated_ids_are_distinct(self):
        assert TechnicalRequirement().id != TechnicalRequirement().id


class TestProjectValidation:
    def test_rating_count_must_match_competitors(self):
        with pytest.raises(ValidationError, match="competitor ratings"):
            QFDProject(
                competitor_names=["A", "B", "C"],
                customer_requirements=[CustomerRequirement(competitor_ratings=[3, 3])],
            )

    def test_duplicate_relationship_rejected(self):
        rel = Relationship(customer_req_id="c", technical_req_id="t", strength=3)
        with pytest.raises(ValidationError, match="Duplicate relationship"):
            QFDProject(relationships=[rel, rel])

    def test_duplicate_correlation_pair_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate technical correlation"):
            QFDProject(
                technical_correlations=[
                    TechnicalCorrelation(tech_req1_id="a", tech_req2_id="b", correlation=1),
                    TechnicalCorrelation(tech_req1_id="b", tech_req2_id="a", correlation=-1),
                ]
            )

    def test_duplicate_requirement_id_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate technical requirement id"):
            QFDProject(
                technical_requirements=[TechnicalRequirement(id="t"), TechnicalRequirement(id="t")]
            )

    def test_json_round_trip(self):
        project = sample_project()
        assert QFDProject.model_validate_json(project.model_dump_json()) == project


class TestIndexes:
    def test_strength_lookup(self):
        project = sample_project()
        assert project.strength("cust1", "tech1") == RelationshipStrength.MEDIUM
        assert project.strength("cust3", "tech1") == RelationshipStrength.NONE

    def test_correlation_lookup_is_symmetric(self):
        project = sample_project()
        assert project.correlation("tech2", "tech1") == CorrelationType.NEGATIVE
        assert project.correlation("tech1", "tech2") == CorrelationType.NEGATIVE
        assert project.correlation("tech3", "tech3") == CorrelationType.NONE

    def test_correlations_by_requirement(self):
        index = sample_project().correlations_by_requirement()
        assert {len(v) for v in index.values()} == {2}
        assert set(index) == {"tech1", "tech2", "tech3"}


class TestEdits:
    def test_add_customer_requirement_defaults(self):
        project = sample_project().add_customer_requirement()
        added = project.customer_requirements[-1]
        assert added.importance == 3
        assert added.competitor_ratings == [3, 3]
        assert len(sample_project().customer_requirements) == 3

    def test_update_customer_requirement(self):
        project = sample_project().update_customer_requirement("cust2", importance=1)
        assert project.customer_requirement("cust2").importance == 1

    def test_update_rejects_invalid_value(self):
        with pytest.raises(ValidationError):
            sample_project().update_technical_requirement("tech1", difficulty=9)

    def test_unknown_id_raises_key_error(self):
        with pytest.raises(KeyError):
            sample_project().remove_customer_requirement("nope")
        with pytest.raises(KeyError):
            sample_project().set_relationship("cust1", "nope", RelationshipStrength.WEAK)

    def test_remove_customer_cascades_relationships(self):
        project = sample_project().remove_customer_requirement("cust1")
        assert all(r.customer_req_id != "cust1" for r in project.relationships)
        assert len(project.relationships) == 2

    def test_remove_technical_cascades(self):
        project = sample_project().remove_technical_requirement("tech1")
        assert all(r.technical_req_id != "tech1" for r in project.relationships)
        assert [c.pair_key for c in project.technical_correlations] == [("tech2", "tech3")]

    def test_set_relationship_upserts_in_place(self):
        project = sample_project().set_relationship("cust1", "tech1", RelationshipStrength.STRONG)
        assert project.strength("cust1", "tech1") == RelationshipStrength.STRONG
        assert len(project.relationships) == 4
        assert project.relationships[3].key == ("cust1", "tech1")

    def test_set_relationship_none_deletes(self):
        project = sample_project().set_relationship("cust1", "tech1", 0)
        assert len(project.relationships) == 3
        assert project.strength("cust1", "tech1") == RelationshipStrength.NONE

    def test_set_correlation_in_either_order(self):
        base = sample_project()
        first = base.set_correlation("tech3", "tech1", CorrelationType.STRONG_NEGATIVE)
        second = base.set_correlation("tech1", "tech3", CorrelationType.STRONG_NEGATIVE)
        assert first.technical_correlations == second.technical_correlations
        assert len(first.technical_correlations) == 3

    def test_set_correlation_none_deletes(self):
        project = sample_project().set_correlation("tech2", "tech1", CorrelationType.NONE)
        assert len(project.technical_correlations) == 2

    def test_set_correlation_self_rejected(self):
        with pytest.raises(ValueError):
            sample_project().set_correlation("tech1", "tech1", CorrelationType.POSITIVE)

    def test_grow_competitor_list_pads_ratings(self):
        project = sample_project().update_competitor_names(["A", "B", "C"])
        assert project.customer_requirement("cust1").competitor_ratings == [3, 4, 3]

    def test_shrink_competitor_list_truncates_ratings(self):
        project = sample_project().update_competitor_names(["Only"])
        assert project.customer_requirement("cust3").competitor_ratings == [3]
        assert project.competitor_names == ("Only",)

    def test_remove_first_competitor_drops_its_column(self):
        project = sample_project().remove_competitor(0)
        assert project.competitor_names == ("Product B",)
        assert project.customer_requirement("cust1").competitor_ratings == [4]
        assert project.customer_requirement("cust2").competitor_ratings == [3]
        assert project.customer_requirement("cust3").competitor_ratings == [5]

    def test_remove_last_competitor_matches_truncation(self):
        base = sample_project()
        assert base.remove_competitor(1) == base.update_competitor_names(["Product A"])

    @pytest.mark.parametrize("index", [-1, 2])
    def test_remove_competitor_out_of_range(self, index):
        with pytest.raises(IndexError):
            sample_project().remove_competitor(index)

    def test_realigned_ratings_are_validated(self, monkeypatch):
        from qfd_engine.config import Settings
        import qfd_engine.models.project as project_module

        unchecked = Settings.model_construct(default_rating=9)
        monkeypatch.setattr(project_module, "get_settings", lambda: unchecked)
        with pytest.raises(ValidationError):
            sample_project().update_competitor_names(["A", "B", "C"])


class TestImmutability:
    def test_collections_cannot_be_appended(self):
        project = sample_project()
        with pytest.raises(AttributeError):
            project.relationships.append(
                Relationship(customer_req_id="cust2", technical_req_id="tech3", strength=1)
            )

    def test_fields_cannot_be_reassigned(self):
        with pytest.raises(ValidationError):
            sample_project().competitor_names = ("X",)

    def test_lists_accepted_on_input(self):
        project = QFDProject(competitor_names=["A"], customer_requirements=[])
        assert project.competitor_names == ("A",)

    def test_json_round_trip(self):
        project = sample_project()
        assert QFDProject.model_validate_json(project.model_dump_json()) == project
