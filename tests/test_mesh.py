"""Tests for the mesh facade, diagnostics, and the audit log."""

import tempfile
from pathlib import Path

import pytest

from collabmesh.core.result import Err, ErrorCode, Ok
from collabmesh.diagnostics import ANALYTICS_MESSAGE, INTEGRITY_MESSAGE
from collabmesh.mesh import Mesh
from collabmesh.security.audit_log import AuditLogger, AuditWriteError


def test_stores_are_independent():
    with tempfile.TemporaryDirectory() as tmpdir:
        mesh = Mesh(tmpdir)
        assert isinstance(mesh.initialize_organization("X", "Acme", "Tech", "US"), Ok)
        assert isinstance(mesh.establish_contributor("X", "ada", ["py"], "US", "bio"), Ok)
        assert isinstance(mesh.publish_requisition("X", "Dev", "Spec", "US", ["py"]), Ok)

        assert isinstance(mesh.terminate_organization("X"), Ok)
        assert mesh.validate_organization_node("X") == Err(ErrorCode.EntityNotFound)
        assert mesh.validate_contributor_node("X") == Ok(True)
        assert mesh.validate_requisition_entry("X") == Ok(True)


def test_full_surface_round_trip():
    with tempfile.TemporaryDirectory() as tmpdir:
        mesh = Mesh(tmpdir)
        mesh.establish_contributor("C", "ada", ["py"], "EU", "bio")
        mesh.update_contributor("C", "ada", ["py", "go"], "EU", "bio")
        assert mesh.fetch_contributor("C").value.competencies == ["py", "go"]
        assert isinstance(mesh.deactivate_contributor("C"), Ok)

        mesh.publish_requisition("S", "Dev", "Spec", "US", ["py"])
        mesh.adjust_requisition("S", "Lead", "Spec", "US", ["py"])
        assert mesh.fetch_requisition("S").value.role_designation == "Lead"
        assert isinstance(mesh.withdraw_requisition("S"), Ok)

        mesh.initialize_organization("O", "Acme", "Tech", "US")
        mesh.modify_organization("O", "Acme", "Tech", "EU")
        assert mesh.fetch_organization("O").value.region == "EU"


def test_diagnostics_are_fixed_messages():
    with tempfile.TemporaryDirectory() as tmpdir:
        mesh = Mesh(tmpdir)
        assert mesh.verify_mesh_integrity() == Ok(INTEGRITY_MESSAGE)
        assert mesh.generate_mesh_analytics() == Ok(ANALYTICS_MESSAGE)


def test_audit_records_committed_mutations_only():
    with tempfile.TemporaryDirectory() as tmpdir:
        mesh = Mesh(tmpdir)
        mesh.initialize_organization("A", "Acme", "Tech", "US")
        mesh.initialize_organization("A", "Acme", "Tech", "US")  # duplicate
        mesh.modify_organization("B", "Acme", "Tech", "US")  # absent
        mesh.publish_requisition("A", "Dev", "Spec", "US", ["py"])

        events = mesh.audit.get_events()
        assert {(e.registry, e.action) for e in events} == {
            ("organization", "initialize"),
            ("requisition", "publish"),
        }
        assert all(e.actor == "A" for e in events)
        assert (Path(tmpdir) / "audit_logs").is_dir()


def test_audit_filters():
    with tempfile.TemporaryDirectory() as tmpdir:
        audit = AuditLogger(Path(tmpdir))
        audit.record("A", "organization", "initialize")
        audit.record("B", "contributor", "establish")
        audit.record("B", "contributor", "deactivate")

        assert len(audit.get_events(actor="B")) == 2
        assert len(audit.get_events(registry="organization")) == 1
        assert len(audit.get_events(action="deactivate")) == 1
        assert len(audit.get_events(limit=1)) == 1


def test_audit_skips_torn_lines():
    with tempfile.TemporaryDirectory() as tmpdir:
        audit = AuditLogger(Path(tmpdir))
        audit.record("A", "organization", "initialize")
        with (Path(tmpdir) / "2000-01-01.jsonl").open("w") as fh:
            fh.write("{not json\n")
        assert len(audit.get_events()) == 1


def test_audit_write_failure_leaves_mutation_committed(monkeypatch):
    with tempfile.TemporaryDirectory() as tmpdir:
        mesh = Mesh(tmpdir)
        # Appending to a directory fails with an OSError.
        monkeypatch.setattr(mesh.audit, "_day_file", lambda stamp: Path(tmpdir))

        with pytest.raises(AuditWriteError) as excinfo:
            mesh.initialize_organization("A", "Acme", "Tech", "US")

        assert excinfo.value.entry.actor == "A"
        assert excinfo.value.entry.action == "initialize"
        assert "committed but not audited" in str(excinfo.value)
        assert mesh.fetch_organization("A").value.designation == "Acme"
