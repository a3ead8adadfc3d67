from marshmallow import Schema, fields, validate


class MatrixOperationSchema(Schema):
    """JSON body for POST /api/v1/matrices/<operation>"""
    matrix_a = fields.String(required=True, validate=validate.Length(min=1))
    matrix_b = fields.String(required=True, validate=validate.Length(min=1))


class MatrixReportSchema(Schema):
    """JSON body for POST /api/v1/matrices/report"""
    matrix = fields.String(required=True, validate=validate.Length(min=1))
    title = fields.String(load_default='MATRIX')
    format = fields.String(load_default='dot', validate=validate.OneOf(['dot', 'svg']))
