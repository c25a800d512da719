"""
Minimal recipe to resolve
- the Docker apt repository (family, codename, arch) for a Debian-family host

Options (host data):
    force_distro     fall back to the Debian repository on unknown distros
    docker_codename  use this release codename instead of the detected one

pyinfra -y -vvv --user USER HOST deploy-docker-repo.py
pyinfra -y --data force_distro=true --data docker_codename=bookworm HOST deploy-docker-repo.py
"""

from pyinfra.operations import python

from common import check_server, log_repository


def main() -> None:
    resolution = check_server()
    show_repository(resolution)


def show_repository(resolution) -> None:
    python.call(
        name="Show Docker repository",
        function=log_repository,
        resolution=resolution,
    )


main()
