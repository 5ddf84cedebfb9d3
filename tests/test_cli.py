import json
from lansim.main import main

def test_show_text(capsys, default_text):
    assert main(["show"]) == 0
    assert capsys.readouterr().out == default_text + "\n"

def test_show_xml_to_file(tmp_path):
    out = tmp_path / "reports" / "ring.xml"
    assert main(["show", "--format", "xml", "--out", str(out)]) == 0
    assert out.read_text().endswith("\n</network>")

def test_validate(capsys):
    assert main(["validate"]) == 0
    out = capsys.readouterr().out
    assert "consistent" in out
    assert "Filip -> Andy: 3 hops" in out
    assert "Hans -> Andy: 1 hops" in out

def test_validate_reports_findings(tmp_path, capsys):
    path = tmp_path / "ring.json"
    path.write_text(json.dumps({"nodes": [{"name": "w", "kind": "workstation"}, {"name": "n"}]}))
    assert main(["validate", "--ring", str(path)]) == 1
    assert "missing_printer" in capsys.readouterr().out

def test_broadcast(capsys):
    assert main(["broadcast"]) == 0
    assert ">>> Broadcast travelled whole token ring." in capsys.readouterr().out

def test_broadcast_refuses_inconsistent_ring(tmp_path):
    path = tmp_path / "ring.json"
    path.write_text(json.dumps({"nodes": [{"name": "w", "kind": "workstation"}]}))
    assert main(["broadcast", "--ring", str(path)]) == 1

def test_print(tmp_path, capsys, default_ring):
    path = tmp_path / "ring.json"
    path.write_text(json.dumps(default_ring))
    assert main(["print", "--ring", str(path), "--workstation", "Filip", "--document", "hello", "--printer", "Andy"]) == 0
    assert ">>> ASCII Print job delivered." in capsys.readouterr().out
    assert main(["print", "--workstation", "Filip", "--document", "hello", "--printer", "Ghost"]) == 1
    assert main(["print", "--workstation", "Andy", "--document", "hello", "--printer", "Andy"]) == 2

def test_missing_ring_file(tmp_path):
    assert main(["show", "--ring", str(tmp_path / "nope.json")]) == 2

def test_plot(tmp_path):
    out = tmp_path / "ring.png"
    assert main(["plot", "--out", str(out)]) == 0
    assert out.stat().st_size > 0

def test_show_writes_utf8(tmp_path):
    ring = tmp_path / "ring.json"
    ring.write_text(json.dumps({"nodes": [{"name": "Zoë", "kind": "workstation"},
                                          {"name": "Łódź", "kind": "printer"}]}), encoding="utf-8")
    out = tmp_path / "ring.html"
    assert main(["show", "--ring", str(ring), "--format", "html", "--out", str(out)]) == 0
    assert "<printer>Łódź</printer>" in out.read_text(encoding="utf-8")
