from pizza_agent.cli import main

main()
