"""
Local image lookup and registry pulls.

The toolchain image is large, so it is only pulled when ``images --no-trunc``
does not already list it.
"""

import logging
import subprocess

from xgokit.core import process
from xgokit.core.exceptions import ImagePullFailed, ImageQueryFailed
from xgokit.container.runtime import DEFAULT_RUNTIME

logger = logging.getLogger(__name__)


class ImageResolver:
    """Ensure a container image is present in the local image store."""

    def __init__(self, runtime: str = DEFAULT_RUNTIME):
        """
        Initialize resolver.

        Args:
            runtime: Container runtime binary used for all queries
        """
        self.runtime = runtime

    def is_available(self, image: str) -> bool:
        """
        Check whether an image is available locally.

        The check is a plain substring test against the untruncated image
        listing, so ``karalabe/xgo-latest`` matches a repository column of
        the same name.

        Args:
            image: Image identifier (e.g., 'karalabe/xgo-latest')

        Returns:
            True if the listing mentions the image

        Raises:
            ImageQueryFailed: If the listing command cannot be executed
        """
        print(
            f"Checking for required {self.runtime} image {image}... ",
            end="",
            flush=True,
        )
        try:
            output = process.capture([self.runtime, "images", "--no-trunc"])
        except (subprocess.CalledProcessError, OSError) as e:
            print()
            raise ImageQueryFailed(e, runtime=self.runtime) from e
        return image in output

    def pull(self, image: str) -> None:
        """
        Pull an image from the registry, streaming progress to the console.

        Raises:
            ImagePullFailed: If the pull command fails
        """
        print(f"Pulling {image} from {self.runtime} registry...")
        try:
            process.run([self.runtime, "pull", image])
        except (subprocess.CalledProcessError, OSError) as e:
            raise ImagePullFailed(e, runtime=self.runtime) from e

    def ensure(self, image: str) -> bool:
        """
        Make sure an image is present, pulling it if necessary.

        Args:
            image: Image identifier

        Returns:
            True if the image had to be pulled, False if it was already present
        """
        if self.is_available(image):
            print("found.")
            return False

        print("not found!")
        logger.debug(f"Image {image} missing locally, pulling")
        self.pull(image)
        return True
