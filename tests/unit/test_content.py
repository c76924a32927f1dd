"""Tests for the clinical content table and its JSON override."""

from __future__ import annotations

import json

import pytest

from cognitive_report.domain.content import (
    CONTENT_VERSION,
    dump_static_content,
    load_static_content,
)
from cognitive_report.domain.models import DomainStatus
from cognitive_report.domain.sections import PAGE_LAYOUT
from cognitive_report.exceptions import ContentLoadError


class TestDefaultContent:
    def test_version_and_locale(self, content):
        assert content.version == CONTENT_VERSION
        assert content.locale == "en-US"

    def test_screening_maxima(self, content):
        assert content.depression.score.display == "2/15"
        assert content.anxiety.score.display == "1/21"

    def test_iadl_score(self, content):
        assert content.iadl.score.display == "6/8"

    def test_domain_scores_split_by_status(self, content):
        statuses = {d.status for d in content.domain_scores}
        assert statuses == {DomainStatus.CONCERN, DomainStatus.PRESERVED}
        assert all(0 <= d.percentile <= 100 for d in content.domain_scores)

    def test_every_topic_section_has_copy(self, content):
        from cognitive_report.domain.sections import _BUILDERS

        topic_ids = {sid for ids in PAGE_LAYOUT.values() for sid in ids if sid not in _BUILDERS}
        assert topic_ids == set(content.topics)
        for sid in topic_ids:
            assert content.topic(sid).cards

    def test_glossary_and_references(self, content):
        assert len(content.glossary) == 9
        assert len(content.references) == 7

    def test_domain_detail_lookup(self, content):
        detail = content.domain_detail("Complex Attention")
        assert detail.task.percentile == 18

    def test_missing_topic_raises(self, content):
        with pytest.raises(ContentLoadError, match="no topic"):
            content.topic("nonexistent")

    def test_missing_domain_detail_raises(self, content):
        with pytest.raises(ContentLoadError, match="no domain detail"):
            content.domain_detail("Visuospatial")


class TestLoadStaticContent:
    def test_none_returns_builtin(self, content):
        assert load_static_content(None) == content

    def test_round_trips_through_json(self, tmp_path, content):
        path = tmp_path / "content.json"
        path.write_text(dump_static_content(), encoding="utf-8")
        assert load_static_content(path) == content

    def test_override_replaces_copy(self, tmp_path):
        data = json.loads(dump_static_content())
        data["version"] = "2025.01-es"
        data["locale"] = "es-ES"
        data["triage"]["badge"] = "REMITIR AHORA"
        path = tmp_path / "es.json"
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")

        loaded = load_static_content(path)
        assert loaded.version == "2025.01-es"
        assert loaded.locale == "es-ES"
        assert loaded.triage.badge == "REMITIR AHORA"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ContentLoadError, match="Cannot read"):
            load_static_content(tmp_path / "absent.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ContentLoadError, match="Cannot read"):
            load_static_content(path)

    def test_wrong_shape(self, tmp_path):
        data = json.loads(dump_static_content())
        del data["triage"]
        path = tmp_path / "partial.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(ContentLoadError, match="Invalid content table"):
            load_static_content(path)
