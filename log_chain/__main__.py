import sys

from log_chain.app import main


sys.exit(main())
