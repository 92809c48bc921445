from ai_chat_cli.cli import main

raise SystemExit(main())
