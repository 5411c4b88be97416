import sys

from chat_relay.startup import main

sys.exit(main())
