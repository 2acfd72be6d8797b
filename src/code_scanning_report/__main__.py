from code_scanning_report.cli import main

main()
