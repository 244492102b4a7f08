import sys

from urlshortener.cli import main


sys.exit(main())
