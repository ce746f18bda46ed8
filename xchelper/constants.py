APP_NAME = "xchelper"

# Directory the Swift toolchain writes build output to, relative to the source root
BUILD_DIR_NAME = ".build"
# Resolved dependency checkouts, relative to BUILD_DIR_NAME
CHECKOUTS_DIR_NAME = "checkouts"
# Resolved dependency cache mounted by older toolchains, relative to the source root
PACKAGES_DIR_NAME = "Packages"

PROJECT_CONFIG_FILE = ".xchelper.yml"

DEFAULT_DOCKER_IMAGE = "swift"
DEFAULT_PLATFORM = "linux"
