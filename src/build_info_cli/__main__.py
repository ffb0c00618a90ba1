from build_info_cli.cli import main

main()
