import io

from bstlab.routers_cli import main

INCR = "Printing tree elements by increasing values:"
DECR = "\nPrinting tree elements by decreasing values:"
DELETE_PROMPT = "\nEnter data for router to delete:"
AFTER = "\nTree after deleting element:"
DONE = "\nTree fully deleted successfully"

ROUTERS = "Asus\n4\nyes\nTplink\n8\nno\nDlink\n2\nyes\n"


def _vendors(block):
    return [
        line[len("Brand name: "):].strip()
        for line in block.split("\n")
        if line.strip().startswith("Brand name: ")
    ]


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    status = main([])
    return status, capsys.readouterr().out


def test_full_session_deletes_router(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "3\n" + ROUTERS + "Asus\n4\nyes\n")
    assert status == 0
    assert "3 - entered count, 3 result vertex count" in out

    ascending = out.split(INCR, 1)[1].split(DECR, 1)[0]
    assert _vendors(ascending) == ["Asus", "Dlink", "Tplink"]

    descending = out.split(DECR, 1)[1].split(DELETE_PROMPT, 1)[0]
    assert _vendors(descending) == ["Tplink", "Dlink", "Asus"]

    assert "Router deleted from tree successfully" in out
    after = out.split(AFTER, 1)[1].split(DONE, 1)[0]
    assert _vendors(after) == ["Dlink", "Tplink"]
    assert out.rstrip().endswith("Tree fully deleted successfully")


def test_router_fields_printed(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "1\nAsus\n4\nyes\nAsus\n4\nno\n")
    assert status == 0
    ascending = out.split(INCR, 1)[1].split(DECR, 1)[0]
    assert "Brand name: Asus \nport_count: 4\nhas 5g: yes" in ascending


def test_missing_router_reported(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "3\n" + ROUTERS + "Asus\n5\nyes\n")
    assert status == 0
    assert "Routed not found in tree" in out
    after = out.split(AFTER, 1)[1].split(DONE, 1)[0]
    assert _vendors(after) == ["Asus", "Dlink", "Tplink"]


def test_same_vendor_ordered_by_ports(monkeypatch, capsys):
    text = "3\nAsus\n8\nyes\nAsus\n2\nyes\nAsus\n4\nyes\nAsus\n2\nyes\n"
    status, out = _run(monkeypatch, capsys, text)
    assert status == 0
    ascending = out.split(INCR, 1)[1].split(DECR, 1)[0]
    ports = [int(line.split(": ")[1]) for line in ascending.split("\n") if line.startswith("port_count")]
    assert ports == sorted(ports)
    after = out.split(AFTER, 1)[1].split(DONE, 1)[0]
    assert len(_vendors(after)) == 2


def test_zero_amount_rejected(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "0\n")
    assert status == 1
    assert "Uncorrect data entered. Minimal amount is 1." in out


def test_bad_amount_rejected(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "-3\n")
    assert status == 1
    assert "Entered value is incorrect." in out


def test_too_many_ports_rejected(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "1\nAsus\n40\nyes\n")
    assert status == 1
    assert "Port count cant be more than 32." in out
    assert "Structure initialization failed." in out
    assert INCR not in out


def test_bad_mark_rejected(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "1\nAsus\n4\nmaybe\n")
    assert status == 1
    assert "Entered 5G mark is incorrect." in out


def test_bad_delete_data_rejected(monkeypatch, capsys):
    status, out = _run(monkeypatch, capsys, "1\nAsus\n4\nyes\nAsus\n4\nmaybe\n")
    assert status == 1
    assert "Error initializing router data." in out
    assert AFTER not in out