from .dynamodb_sequence import DynamoDBSequence as DynamoDBSequence
