from .sky_hopper_client import main

main()
