"""Small CLI for interacting with the election Flask server.

Usage examples:
    election-sim init
    election-sim register --name Alice --credential pw1
    election-sim add-candidate --name "John Doe" --affiliation "Party A"
    election-sim cast --voter Alice --credential pw1 --candidate "John Doe"
    election-sim results
"""

import argparse
import logging

import requests

from election_sim import config

logger = logging.getLogger(__name__)


def _show(r: requests.Response):
    print(r.json())
    return r


def init(base: str = config.BASE_URL):
    return _show(requests.post(f"{base}/init", timeout=config.REQUEST_TIMEOUT))


def register(name: str, credential: str, base: str = config.BASE_URL):
    return _show(
        requests.post(
            f"{base}/voters",
            json={"name": name, "credential": credential},
            timeout=config.REQUEST_TIMEOUT,
        )
    )


def add_candidate(name: str, affiliation: str, base: str = config.BASE_URL):
    return _show(
        requests.post(
            f"{base}/candidates",
            json={"name": name, "affiliation": affiliation},
            timeout=config.REQUEST_TIMEOUT,
        )
    )


def cast(voter: str, credential: str, candidate: str, base: str = config.BASE_URL):
    return _show(
        requests.post(
            f"{base}/cast",
            json={"voter": voter, "credential": credential, "candidate": candidate},
            timeout=config.REQUEST_TIMEOUT,
        )
    )


def results(base: str = config.BASE_URL):
    return _show(requests.get(f"{base}/results", timeout=config.REQUEST_TIMEOUT))


def main(argv=None):
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    p = argparse.ArgumentParser(prog="election-sim")
    p.add_argument("--base", default=config.BASE_URL)
    sub = p.add_subparsers(dest="cmd")
    sub.add_parser("init")
    r = sub.add_parser("register")
    r.add_argument("--name", required=True)
    r.add_argument("--credential", required=True)
    a = sub.add_parser("add-candidate")
    a.add_argument("--name", required=True)
    a.add_argument("--affiliation", required=True)
    c = sub.add_parser("cast")
    c.add_argument("--voter", required=True)
    c.add_argument("--credential", required=True)
    c.add_argument("--candidate", required=True)
    sub.add_parser("results")
    args = p.parse_args(argv)
    try:
        if args.cmd == "init":
            init(args.base)
        elif args.cmd == "register":
            register(args.name, args.credential, args.base)
        elif args.cmd == "add-candidate":
            add_candidate(args.name, args.affiliation, args.base)
        elif args.cmd == "cast":
            cast(args.voter, args.credential, args.candidate, args.base)
        elif args.cmd == "results":
            results(args.base)
        else:
            p.print_help()
            return 0
    except requests.RequestException as e:
        logger.error(f"Request to {args.base} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
