from packrat.cli.main_cli import main

main()
