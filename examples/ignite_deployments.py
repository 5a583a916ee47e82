"""
Example usage of the Hop Ignite API.

This example walks through a deployment's lifecycle:
- create a deployment from a public image
- look it up by name
- start a container, read its logs, then stop it
- expose it through an external HTTP gateway

Requirements:
- HOP_TOKEN environment variable set (or in a .env file) (a project token, ``ptk_...``)

Usage:
    python examples/ignite_deployments.py
"""

import os

from dotenv import load_dotenv

from hop import APIError, Hop

load_dotenv()

HOP_TOKEN = os.getenv("HOP_TOKEN")


def main() -> None:
    if not HOP_TOKEN:
        print("HOP_TOKEN environment variable is required")
        return

    hop = Hop(HOP_TOKEN)

    deployment = hop.ignite.deployments.create(
        {
            "name": "hello-world",
            "image": {"name": "nginxdemos/hello"},
            "resources": {"vcpu": 0.5, "ram": "128mb"},
            "env": {"PORT": "80"},
            "restart_policy": "on-failure",
        }
    )
    print(f"Created deployment {deployment.id} ({deployment.name})")

    # Names and IDs are both accepted.
    same = hop.ignite.deployments.get("hello-world")
    assert same.id == deployment.id

    container = hop.ignite.containers.create(deployment.id)
    print(f"Started container {container.id}: {container.state}")

    for line in hop.ignite.containers.get_logs(container.id):
        print(f"  [{line.timestamp}] {line.message}")

    gateway = hop.ignite.deployments.gateways.create(
        deployment.id, "external", "http", 80
    )
    print(f"Reachable at https://{gateway.hopsh_domain}")

    try:
        hop.ignite.containers.stop(container.id)
    except APIError as exc:
        print(f"Could not stop {container.id}: {exc}")

    hop.ignite.deployments.delete(deployment.id)
    print("Deleted deployment")


if __name__ == "__main__":
    main()
