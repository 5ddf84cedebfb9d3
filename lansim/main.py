from __future__ import annotations
import argparse, os, sys
from rich import print as rprint

from .network import Network
from .nodes import LabelFormat
from .parser import RingFileError, load_ring
from .serializers import RENDERERS
from .topology import hop_distance, is_single_cycle, ring_graph
from .utils import setup_logging

def _network(args) -> Network:
    if args.ring:
        return load_ring(args.ring)
    return Network.default_example()

def cmd_show(args):
    net = _network(args)
    out = RENDERERS[LabelFormat(args.format)](net.first_node)
    if args.out:
        if os.path.dirname(args.out):
            os.makedirs(os.path.dirname(args.out), exist_ok=True)
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(out)
        rprint(f"[green]Wrote[/green] {args.out}")
    else:
        sys.stdout.write(out + "\n")
    return 0

def cmd_validate(args):
    net = _network(args)
    issues = net.consistency_issues()
    if net.first_node is not None:
        G = ring_graph(net.first_node)
        rprint(f"{G.number_of_nodes()} nodes, single cycle: {is_single_cycle(G)}")
    if not issues:
        rprint("[green]Network is consistent[/green]")
        printers = [n for n, k in G.nodes(data="kind") if k == "printer"]
        for ws in sorted(net.workstations):
            for pr in printers:
                rprint(f"  {ws} -> {pr}: {hop_distance(G, ws, pr)} hops")
        return 0
    rprint(f"[yellow]{len(issues)}[/yellow] findings")
    for i in issues:
        rprint(i)
    return 1

def _refuse_inconsistent(net: Network) -> bool:
    issues = net.consistency_issues()
    for i in issues:
        rprint(f"[red]inconsistent network:[/red] {i}")
    return bool(issues)

def cmd_broadcast(args):
    net = _network(args)
    if _refuse_inconsistent(net):
        return 1
    net.request_broadcast(sys.stdout)
    return 0

def cmd_print(args):
    net = _network(args)
    if _refuse_inconsistent(net):
        return 1
    if not net.has_workstation(args.workstation):
        rprint(f"[red]No workstation named {args.workstation}[/red]")
        return 2
    ok = net.request_print(args.workstation, args.document, args.printer, sys.stdout)
    return 0 if ok else 1

def cmd_plot(args):
    from .plot import draw_ring
    net = _network(args)
    draw_ring(net.first_node, args.out)
    rprint(f"Wrote ring diagram to {args.out}")
    return 0

def build_argparse():
    ap = argparse.ArgumentParser(prog="lansim")
    ap.add_argument("-v", "--verbose", action="store_true")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ss = sub.add_parser("show")
    ss.add_argument("--ring")
    ss.add_argument("--format", choices=[f.value for f in LabelFormat], default="text")
    ss.add_argument("--out")
    ss.set_defaults(func=cmd_show)

    sv = sub.add_parser("validate")
    sv.add_argument("--ring")
    sv.set_defaults(func=cmd_validate)

    sb = sub.add_parser("broadcast")
    sb.add_argument("--ring")
    sb.set_defaults(func=cmd_broadcast)

    sp = sub.add_parser("print")
    sp.add_argument("--ring")
    sp.add_argument("--workstation", required=True)
    sp.add_argument("--document", required=True)
    sp.add_argument("--printer", required=True)
    sp.set_defaults(func=cmd_print)

    sl = sub.add_parser("plot")
    sl.add_argument("--ring")
    sl.add_argument("--out", required=True)
    sl.set_defaults(func=cmd_plot)

    return ap

def main(argv=None):
    ap = build_argparse()
    args = ap.parse_args(argv)
    setup_logging(args.verbose)
    try:
        return args.func(args)
    except (RingFileError, OSError) as exc:
        rprint(f"[red]{exc}[/red]")
        return 2

if __name__ == "__main__":
    sys.exit(main())
