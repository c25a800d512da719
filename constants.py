DOCKER_DOWNLOAD_URL = "https://download.docker.com/linux"
DOCKER_KEYRING = "/etc/apt/keyrings/docker.asc"
DOCKER_CHANNEL = "stable"

