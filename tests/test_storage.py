from lexdesk.documents import storage


def test_stored_name_prefixes_timestamp():
    assert storage.stored_name_for("brief.pdf", now_ms=1700000000123) == "1700000000123-brief.pdf"


def test_safe_original_name():
    assert storage.safe_original_name("../secret/plan.docx") == "plan.docx"
    assert storage.safe_original_name("C:\\Users\\me\\plan.docx") == "plan.docx"
    assert storage.safe_original_name("") == "upload"


def test_content_type_for():
    assert storage.content_type_for("a.PDF") == "application/pdf"
    assert storage.content_type_for("a.jpeg") == "image/jpeg"
    assert storage.content_type_for("README") == "application/octet-stream"


def test_resolve_rejects_unsafe_names(upload_dir):
    upload_dir.mkdir()
    (upload_dir / "1-ok.txt").write_bytes(b"ok")
    assert storage.resolve_stored_file("1-ok.txt") == upload_dir / "1-ok.txt"
    assert storage.resolve_stored_file("..") is None
    assert storage.resolve_stored_file("sub/1-ok.txt") is None
    assert storage.resolve_stored_file("2-missing.txt") is None
