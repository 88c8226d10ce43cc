from investor_agent.cli import main

main()
