"""
Pulumi program entry point for the basic AWS infrastructure.

Run from the repository root with `pulumi preview` / `pulumi up` /
`pulumi destroy`; Pulumi.yaml points here.
"""

from IAC.program import pulumi_program

# Execute
pulumi_program()
