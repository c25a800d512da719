# inventory.py
# See: https://docs.pyinfra.com/en/3.x/inventory-data.html
#
# pyinfra -y inventory.py deploy-docker-repo.py

import os

_default_hostname = "raspberrypi.local"
_hostname = os.getenv("SERVER_NAME", _default_hostname)
_force_distro = os.getenv("FORCE_DISTRO", "")
_docker_codename = os.getenv("DOCKER_CODENAME", "")

__all__ = ["hosts"]

hosts = [
    (
        _hostname,
        {
            "force_distro": _force_distro,
            "docker_codename": _docker_codename,
        },
    ),
]
